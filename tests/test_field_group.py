"""Tests for features/field_groups/models.py — the FieldGroup record."""

import pytest

from userfields.features.field_groups.models import FieldGroup, InvalidPropertyError


@pytest.fixture
def make_group(repo, hook_registry):
    def _make(id_or_group=None):
        return FieldGroup(id_or_group, repo=repo, hooks=hook_registry)
    return _make


class TestConstruction:
    def test_empty_group(self, make_group):
        group = make_group()
        assert group.id == 0
        assert group.name is None
        assert group.description is None
        assert not group.exists()

    def test_unknown_id_stays_empty(self, make_group):
        assert not make_group(999).exists()
        assert not make_group("abc").exists()

    def test_load_by_id_and_numeric_string(self, make_group):
        group_id = make_group().add({"name": "Primary", "group_order": 2})
        by_int = make_group(group_id)
        by_str = make_group(str(group_id))
        assert by_int.exists()
        assert by_int.to_dict() == by_str.to_dict()
        assert by_int.name == "Primary"
        assert by_int.group_order == 2

    def test_copy_from_instance(self, make_group):
        original = make_group()
        original.add({"name": "Primary", "description": "Main"})
        copy = make_group(original)
        assert copy.to_dict() == original.to_dict()
        assert copy.exists()

    def test_invalid_property(self, make_group):
        group = make_group()
        with pytest.raises(InvalidPropertyError) as exc:
            group.color
        assert exc.value.code == "field-group-invalid-property"
        assert "color" in str(exc.value)
        assert not hasattr(group, "color")


class TestAdd:
    def test_requires_name(self, make_group, repo):
        assert make_group().add({"description": "no name"}) is None
        assert make_group().add({"name": ""}) is None
        assert repo.count() == 0

    def test_insert_then_read_round_trip(self, make_group):
        group = make_group()
        group_id = group.add({
            "name": "  Primary ",
            "description": "<b>Main</b> fields",
            "group_order": "3",
        })
        assert group_id is not None and group_id > 0
        assert group.id == group_id
        assert group.exists()

        stored = make_group(group_id)
        assert stored.to_dict() == {
            "id": group_id,
            "group_order": 3,
            "name": "Primary",
            "description": "Main fields",
        }

    def test_invalid_order_falls_back_to_default(self, make_group):
        group = make_group()
        group.add({"name": "A", "group_order": "first"})
        assert group.group_order == 0

    def test_missing_description_uses_column_default(self, make_group):
        group = make_group()
        group.add({"name": "A"})
        assert group.description == ""

    def test_existing_group_delegates_to_update(self, make_group, repo):
        group = make_group()
        group_id = group.add({"name": "A"})
        assert group.add({"name": "B"}) == group_id
        assert repo.count() == 1
        assert make_group(group_id).name == "B"

    def test_insert_hooks(self, make_group, hook_registry):
        calls = []
        hook_registry.add_filter("insert_field_group", lambda args: {**args, "group_order": 9})
        hook_registry.add_action("pre_insert_field_group", lambda args: calls.append(("pre", dict(args))))
        hook_registry.add_action("post_insert_field_group", lambda args, gid: calls.append(("post", gid)))

        group = make_group()
        group_id = group.add({"name": "<i>A</i>"})

        assert group.group_order == 9
        assert calls == [("pre", {"name": "A", "group_order": 9}), ("post", group_id)]


class TestUpdate:
    def test_update_known_columns(self, make_group):
        group = make_group()
        group_id = group.add({"name": "A", "group_order": 1})
        assert group.update({"name": "Renamed", "group_order": 5}) is True
        assert group.name == "Renamed"
        stored = make_group(group_id)
        assert stored.name == "Renamed"
        assert stored.group_order == 5

    def test_partial_update_keeps_other_columns(self, make_group):
        group = make_group()
        group.add({"name": "A", "description": "keep me"})
        assert group.update({"group_order": 4}) is True
        assert group.description == "keep me"
        assert group.group_order == 4

    def test_unknown_columns_are_a_noop_success(self, make_group):
        group = make_group()
        group_id = group.add({"name": "A"})
        before = group.to_dict()
        assert group.update({"color": "red", "size": 3}) is True
        assert group.to_dict() == before
        assert make_group(group_id).to_dict() == before

    def test_noop_reloads_current_state(self, make_group, repo):
        group = make_group()
        group_id = group.add({"name": "A"})
        repo.update(group_id, {"name": "Changed elsewhere"})
        assert group.update({}) is True
        assert group.name == "Changed elsewhere"

    def test_update_unsaved_group_fails(self, make_group):
        assert make_group().update({"name": "A"}) is False

    def test_invalid_integer_on_update_uses_default(self, make_group):
        group = make_group()
        group.add({"name": "A", "group_order": 6})
        group.update({"group_order": "-2"})
        assert group.group_order == 0

    def test_update_hooks_receive_group_id(self, make_group, hook_registry):
        seen = []
        hook_registry.add_filter("update_field_group", lambda args, gid: {**args, "description": f"#{gid}"})
        hook_registry.add_action("pre_update_field_group", lambda args, gid: seen.append(("pre", gid)))
        hook_registry.add_action("post_update_field_group", lambda args, gid: seen.append(("post", gid)))

        group = make_group()
        group_id = group.add({"name": "A"})
        group.update({"name": "B"})

        assert group.description == f"#{group_id}"
        assert seen == [("pre", group_id), ("post", group_id)]

    def test_post_update_fires_on_failure(self, make_group, hook_registry):
        seen = []
        hook_registry.add_action("post_update_field_group", lambda args, gid: seen.append(gid))
        make_group().update({"name": "A"})
        assert seen == [0]


class TestMalformedInput:
    def test_huge_order_is_stored_as_default(self, make_group, repo):
        group = make_group()
        group_id = group.add({"name": "A", "group_order": 10**20})
        assert group_id is not None
        assert make_group(group_id).group_order == 0

    def test_infinite_order_on_update(self, make_group):
        group = make_group()
        group.add({"name": "A", "group_order": 2})
        assert group.update({"group_order": "1e400"}) is True
        assert group.group_order == 0

    @pytest.mark.parametrize("name", ["   ", "<b></b>", "<script>x</script>", "%20", "0", None])
    def test_name_empty_after_cleaning_is_refused(self, make_group, repo, name):
        assert make_group().add({"name": name}) is None
        assert repo.count() == 0

    def test_filter_blanking_the_name_is_refused(self, make_group, repo, hook_registry):
        inserted = []
        hook_registry.add_filter("insert_field_group", lambda args: {**args, "name": " "})
        hook_registry.add_action("pre_insert_field_group", lambda args: inserted.append(args))
        assert make_group().add({"name": "A"}) is None
        assert inserted == []
        assert repo.count() == 0

    @pytest.mark.parametrize("name", [None, "", "  ", "<i></i>"])
    def test_update_refuses_empty_name(self, make_group, name):
        group = make_group()
        group_id = group.add({"name": "Primary"})
        assert group.update({"name": name}) is False
        assert make_group(group_id).name == "Primary"

    def test_mapping_values_are_coerced(self, make_group):
        group = make_group({"id": "5", "group_order": "2", "name": "A"})
        assert group.id == 5
        assert group.group_order == 2
        assert group.exists()

    def test_mapping_with_garbage_id_does_not_exist(self, make_group):
        assert not make_group({"id": "abc", "name": "A"}).exists()
