"""Form state store: seeding, edits, re-projection and required tracking."""

import pytest

from dynamic_form import (
    ConfigLoadError,
    FieldDefinition,
    FieldEdit,
    FormControls,
    FormStateStore,
    SimpleCondition,
    UnknownFieldError,
    evaluate,
)


def names(projection):
    return [pf.name for pf in projection]


class TestInitialize:
    def test_seeds_defaults(self, store):
        values = store.values
        assert values["event_type"] == ""
        assert values["vip_perks"] == {}
        assert values["newsletter"] is False
        assert set(values) == {f.name for f in store.fields}

    def test_declared_value_and_checked(self):
        store = FormStateStore([
            FieldDefinition.model_validate({"variant": "Input", "name": "city", "value": "Oslo"}),
            FieldDefinition.model_validate({"variant": "Checkbox", "name": "agree", "checked": True}),
            FieldDefinition.model_validate({"variant": "Slider", "name": "level", "value": 0}),
        ])
        assert store.values == {"city": "Oslo", "agree": True, "level": 0}

    def test_duplicate_names_prevent_session(self):
        field = FieldDefinition.model_validate({"variant": "Input", "name": "dup"})
        with pytest.raises(ConfigLoadError):
            FormStateStore([field, field])

    def test_reinitialize_resets(self, store, event_fields):
        store.set_value("event_type", "conference")
        store.initialize(event_fields)
        assert store.values["event_type"] == ""
        assert store.revision == 0


class TestSetValue:
    def test_example_a(self, store):
        projection = store.set_value("event_type", "conference")
        assert "ticket_type" in names(projection)
        projection = store.set_value("event_type", "workshop")
        assert "ticket_type" not in names(projection)

    def test_example_b(self, store):
        store.apply([
            FieldEdit("event_type", "conference"),
            FieldEdit("ticket_type", "vip"),
            FieldEdit("vip_perks", {"gala_dinner": True}),
        ])
        dietary = next(pf for pf in store.projection if pf.name == "dietary_restrictions")
        assert dietary.effective.required is True

    def test_example_c(self, store):
        store.set_value("event_type", "workshop")
        assert "workshop_session" not in names(store.projection)
        store.set_value("workshop_topic", "advanced_react")
        session = next(pf for pf in store.projection if pf.name == "workshop_session")
        assert [o.value for o in session.effective.options] == ["react_a", "react_b"]

    def test_example_d(self, store):
        store.set_controls(FormControls(all_required=True))
        billing = next(pf for pf in store.projection if pf.name == "billing_company")
        assert billing.field.required is False
        assert billing.effective.required is True

    def test_unknown_field(self, store):
        with pytest.raises(UnknownFieldError):
            store.set_value("nope", "x")
        with pytest.raises(UnknownFieldError):
            store.get_value("nope")

    def test_same_value_is_a_no_op(self, store):
        store.set_value("event_type", "conference")
        revision, projection = store.revision, store.projection
        assert store.set_value("event_type", "conference") == projection
        assert store.revision == revision

    def test_bool_replacing_number_is_applied(self, store):
        store.set_value("vip_perks", {"gala_dinner": 1})
        revision = store.revision
        store.set_value("vip_perks", {"gala_dinner": True})
        assert store.revision == revision + 1
        assert store.values["vip_perks"]["gala_dinner"] is True
        assert evaluate(SimpleCondition(field="vip_perks", operator="isChecked", value="gala_dinner"), store.values)

    def test_hidden_value_survives(self, store):
        store.apply([FieldEdit("event_type", "conference"), FieldEdit("ticket_type", "vip")])
        store.set_value("event_type", "workshop")
        assert "ticket_type" not in names(store.projection)
        assert store.get_value("ticket_type") == "vip"
        store.set_value("event_type", "conference")
        assert "ticket_type" in names(store.projection)
        assert store.values["ticket_type"] == "vip"

    def test_edits_apply_in_order(self, store):
        store.apply([
            FieldEdit("event_type", "conference"),
            FieldEdit("event_type", "workshop"),
            ("event_type", "webinar"),
        ])
        assert store.values["event_type"] == "webinar"
        assert store.revision == 3

    def test_snapshots_are_isolated(self, store):
        perks = {"gala_dinner": True}
        store.set_value("vip_perks", perks)
        perks["swag_bag"] = True
        snapshot = store.values
        snapshot["vip_perks"]["meet_greet"] = True
        assert store.values["vip_perks"] == {"gala_dinner": True}

    def test_controls_change_reprojects(self, store):
        store.set_controls(FormControls().with_variant("Input", False))
        assert names(store.projection) == ["event_type", "newsletter"]
        assert store.controls.is_variant_visible("Input") is False


class TestMissingRequired:
    def test_initial(self, store):
        assert store.missing_required() == ["event_type", "registrant_name", "registrant_username"]

    def test_hidden_fields_not_reported(self, store):
        store.set_value("event_type", "conference")
        assert "ticket_type" in store.missing_required()
        store.set_value("event_type", "webinar")
        assert "ticket_type" not in store.missing_required()

    def test_checkbox_group_and_toggle(self, store):
        store.apply([
            FieldEdit("event_type", "conference"),
            FieldEdit("ticket_type", "vip"),
            FieldEdit("vip_perks", {"gala_dinner": True}),
            FieldEdit("newsletter", True),
        ])
        missing = store.missing_required()
        assert "dietary_restrictions" in missing
        assert "newsletter_email" in missing
        store.set_value("dietary_restrictions", "Vegetarian")
        assert "dietary_restrictions" not in store.missing_required()

    def test_all_required_counts_empty_groups(self, store):
        store.apply([FieldEdit("event_type", "conference"), FieldEdit("ticket_type", "vip")])
        store.set_controls(FormControls(all_required=True))
        assert "vip_perks" in store.missing_required()
        assert "newsletter" in store.missing_required()
        store.set_value("vip_perks", {"swag_bag": False})
        assert "vip_perks" in store.missing_required()
        store.set_value("vip_perks", {"swag_bag": True})
        assert "vip_perks" not in store.missing_required()
