"""Definition registry and resolution queue tests."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from swgen.definition_registry import DefinitionRegistry, ResolutionQueue
from swgen.schema_model import SchemaObject


class _First:
    pass


class _Second:
    pass


def test_first_claimant_keeps_display_name() -> None:
    registry = DefinitionRegistry()

    first = registry.reserve_name(_First, "Pet", "zoo.Pet")
    second = registry.reserve_name(_Second, "Pet", "farm.Pet")

    assert first == "Pet"
    assert second == "farm.Pet"
    assert registry.reserve_name(_First, "Pet", "zoo.Pet") == "Pet"
    assert registry.reserve_name(_Second, "Pet", "farm.Pet") == "farm.Pet"


def test_register_upserts_and_export_sorts_and_strips_refs() -> None:
    registry = DefinitionRegistry()
    registry.register("Zebra", SchemaObject(type="object"))
    registry.register("Ant", SchemaObject(ref="#/definitions/Ant", type="object"))
    registry.register("Zebra", SchemaObject(type="string", type_name="Zebra"))

    exported = registry.export()

    assert list(exported) == ["Ant", "Zebra"]
    assert exported["Ant"].ref == ""
    assert exported["Zebra"].type == "string"
    assert registry.get("Ant") is not None and registry.get("Ant").ref == "#/definitions/Ant"
    assert len(registry) == 2


def test_delete_and_reset() -> None:
    registry = DefinitionRegistry()
    registry.reserve_name(_First, "Pet", "zoo.Pet")
    registry.register("Pet", SchemaObject(type="object"))

    registry.delete("Pet")
    registry.delete("Missing")
    assert not registry.exists("Pet")

    registry.register("Pet", SchemaObject(type="object"))
    registry.reset()
    assert len(registry) == 0
    assert registry.reserve_name(_Second, "Pet", "farm.Pet") == "Pet"


def test_concurrent_reservations_hand_out_one_name_per_identity() -> None:
    registry = DefinitionRegistry()
    owners = [type(f"Owner{index}", (), {}) for index in range(8)]

    with ThreadPoolExecutor(max_workers=8) as executor:
        names = list(
            executor.map(
                lambda owner: registry.reserve_name(owner, "Shared", f"mod.{owner.__name__}"),
                owners,
            )
        )

    assert names.count("Shared") == 1
    assert len(set(names)) == len(owners)


def test_queue_add_is_idempotent_per_name() -> None:
    queue = ResolutionQueue()

    assert queue.add("Pet", _First)
    assert not queue.add("Pet", _Second)
    assert queue.contains("Pet")
    assert queue.snapshot() == {"Pet": _First}

    queue.discard("Pet")
    assert not queue.contains("Pet")
    assert len(queue) == 0


def test_queue_snapshot_is_detached_and_reset_clears() -> None:
    queue = ResolutionQueue()
    queue.add("Pet", _First)

    snapshot = queue.snapshot()
    queue.add("Owner", _Second)

    assert list(snapshot) == ["Pet"]
    queue.reset()
    assert len(queue) == 0
