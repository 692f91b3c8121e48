import dataclasses

import pytest

from env_vars_struct import MissingValueError, build_config_class, env_vars_struct, materialize
from env_vars_struct.accessors import get_value_by_path
from env_vars_struct.schema import build_schema_from_names
from env_vars_struct.sources import mapping_lookup


# -----------------------------------------------------------------------------
# Construction
# -----------------------------------------------------------------------------

def test_construct_from_mapping(sample_names, sample_values):
    Vars = build_config_class(sample_names, lookup=mapping_lookup(sample_values))
    vars = Vars()

    assert vars.database.host == "host"
    assert vars.database.port == "5432"
    assert vars.api.key == "magic key"
    assert vars.api.secret == "magic secret"
    assert vars.cache.redis.url == "redis://someplace"
    assert vars.hat == "fedora"


def test_class_names_follow_schema(sample_names, identity_lookup):
    Vars = build_config_class(sample_names, lookup=identity_lookup)
    vars = Vars()

    assert Vars.__name__ == "Vars"
    assert type(vars.database).__name__ == "VarsDatabase"
    assert type(vars.cache.redis).__name__ == "VarsCacheRedis"


def test_round_trip_with_identity_lookup(sample_names, identity_lookup):
    """Every name, followed through normalized fields, reads back as itself."""
    names = sample_names + ["CACHE.REDIS-URL", "Mixed.Case-Name"]
    vars = build_config_class(names, lookup=identity_lookup)()

    for name in names:
        assert get_value_by_path(vars, name) == name


def test_materialize_returns_every_record(sample_names, identity_lookup):
    schema = build_schema_from_names(sample_names)
    classes = materialize(schema, identity_lookup)

    assert list(classes) == schema.type_names()
    assert all(dataclasses.is_dataclass(cls) for cls in classes.values())


def test_fields_are_in_schema_order(identity_lookup):
    Vars = build_config_class(["B.X", "A.Y", "C"], lookup=identity_lookup)
    assert [f.name for f in dataclasses.fields(Vars)] == ["a", "b", "c"]


def test_lookups_happen_in_field_order():
    calls = []

    def lookup(key):
        calls.append(key)
        return "v"

    Vars = build_config_class(["C", "B.X", "A.Y"], lookup=lookup)
    assert calls == []

    Vars()
    assert calls == ["A.Y", "B.X", "C"]


def test_namespace_wins_at_runtime(identity_lookup):
    vars = build_config_class(["A", "A.B"], lookup=identity_lookup)()

    assert dataclasses.is_dataclass(vars.a)
    assert vars.a.b == "A.B"


def test_instances_are_immutable(identity_lookup):
    vars = build_config_class(["DB.HOST", "HAT"], lookup=identity_lookup)()

    with pytest.raises(dataclasses.FrozenInstanceError):
        vars.hat = "beret"
    with pytest.raises(dataclasses.FrozenInstanceError):
        vars.db.host = "elsewhere"


def test_custom_root_name(identity_lookup):
    Settings = build_config_class(["DB.HOST"], lookup=identity_lookup, root_name="Settings")
    settings = Settings()

    assert Settings.__name__ == "Settings"
    assert type(settings.db).__name__ == "SettingsDb"


def test_empty_names_give_empty_config():
    Vars = build_config_class([])
    assert dataclasses.fields(Vars()) == ()


# -----------------------------------------------------------------------------
# Missing values
# -----------------------------------------------------------------------------

def test_missing_value_is_fatal():
    Vars = build_config_class(["HAT"], lookup=mapping_lookup({}))

    with pytest.raises(MissingValueError) as exc_info:
        Vars()

    assert exc_info.value.key == "HAT"
    assert "HAT" in str(exc_info.value)


def test_missing_nested_value_names_full_key():
    Vars = build_config_class(
        ["DATABASE.HOST", "DATABASE.PORT"],
        lookup=mapping_lookup({"DATABASE.HOST": "host"}),
    )

    with pytest.raises(MissingValueError, match="DATABASE.PORT"):
        Vars()


def test_missing_value_error_is_lookup_error():
    Vars = build_config_class(["HAT"], lookup=mapping_lookup({}))
    with pytest.raises(LookupError):
        Vars()


def test_empty_string_is_a_value():
    vars = build_config_class(["HAT"], lookup=mapping_lookup({"HAT": ""}))()
    assert vars.hat == ""


# -----------------------------------------------------------------------------
# Environment
# -----------------------------------------------------------------------------

def test_env_vars_struct_reads_environment(monkeypatch):
    monkeypatch.setenv("HAT", "fedora")
    monkeypatch.setenv("DATABASE.HOST", "db.internal")

    Vars = env_vars_struct("DATABASE.HOST", "HAT")
    vars = Vars()

    assert vars.hat == "fedora"
    assert vars.database.host == "db.internal"


def test_environment_read_at_construction_time(monkeypatch):
    monkeypatch.delenv("EVS_TEST_LATE", raising=False)
    Vars = env_vars_struct("EVS_TEST_LATE")

    with pytest.raises(MissingValueError):
        Vars()

    monkeypatch.setenv("EVS_TEST_LATE", "now")
    assert Vars().evs_test_late == "now"
