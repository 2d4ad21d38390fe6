from __future__ import annotations

from typing import Any, Dict

import pytest

from linode_sdk.models.instances import (
    InstanceCloneOptions,
    InstanceConfigDevice,
    InstanceConfigInterfaceCreateOptions,
    InstanceCreateOptions,
    InstanceCreatePlacementGroupOptions,
    InstanceMetadataOptions,
    InstanceMigrateOptions,
    InstanceRebuildOptions,
    InstanceRescueOptions,
    InstanceResizeOptions,
    InstanceUpdateOptions,
)
from linode_sdk.types import InstanceMigrationType


def _instance(**overrides: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "id": 123,
        "label": "web-1",
        "region": "us-east",
        "type": "g6-standard-1",
        "status": "running",
        "ipv4": ["192.0.2.10"],
        "created": "2021-06-01T12:00:00",
        "updated": "2021-06-01T12:00:00",
    }
    payload.update(overrides)
    return payload


def test_get_instance(client, fake_api) -> None:
    fake_api.add("GET", "linode/instances/123", _instance())

    instance = client.get_instance(123)

    assert instance.id == 123
    assert instance.label == "web-1"


def test_get_instance_transfer(client, fake_api) -> None:
    fake_api.add("GET", "linode/instances/123/transfer", {"used": 10, "billable": 0, "quota": 1000})

    assert client.get_instance_transfer(123).quota == 1000


def test_create_instance_sends_only_set_fields(client, fake_api) -> None:
    fake_api.add("POST", "linode/instances", _instance())

    client.create_instance(
        InstanceCreateOptions(
            region="us-east",
            type="g6-standard-1",
            image="linode/debian12",
            booted=False,
            tags=[],
            interfaces=[InstanceConfigInterfaceCreateOptions(purpose="public")],
            metadata=InstanceMetadataOptions(user_data="IyEvYmluL2Jhc2g="),
            placement_group=InstanceCreatePlacementGroupOptions(id=7),
        )
    )

    assert fake_api.calls[0]["body"] == {
        "region": "us-east",
        "type": "g6-standard-1",
        "image": "linode/debian12",
        "booted": False,
        "tags": [],
        "interfaces": [{"purpose": "public"}],
        "metadata": {"user_data": "IyEvYmluL2Jhc2g="},
        "placement_group": {"id": 7},
    }


def test_create_options_reject_unknown_fields() -> None:
    with pytest.raises(ValueError):
        InstanceCreateOptions(region="us-east", type="g6-nanode-1", colour="blue")


def test_update_instance(client, fake_api) -> None:
    fake_api.add("PUT", "linode/instances/123", _instance(label="renamed"))

    instance = client.update_instance(123, InstanceUpdateOptions(label="renamed", watchdog_enabled=False))

    assert instance.label == "renamed"
    assert fake_api.calls[0]["body"] == {"label": "renamed", "watchdog_enabled": False}


def test_rename_instance(client, fake_api) -> None:
    fake_api.add("PUT", "linode/instances/123", _instance(label="web-2"))

    assert client.rename_instance(123, "web-2").label == "web-2"
    assert fake_api.calls[0]["body"] == {"label": "web-2"}


def test_delete_instance(client, fake_api) -> None:
    fake_api.add("DELETE", "linode/instances/123", None)

    assert client.delete_instance(123) is None
    assert fake_api.calls[0]["body"] is None


def test_boot_without_config_sends_no_body(client, fake_api) -> None:
    fake_api.add("POST", "linode/instances/123/boot", None)

    client.boot_instance(123)

    assert fake_api.calls[0]["body"] is None


def test_boot_with_config(client, fake_api) -> None:
    fake_api.add("POST", "linode/instances/123/boot", {})

    client.boot_instance(123, config_id=456)

    assert fake_api.calls[0]["body"] == {"config_id": 456}


def test_reboot_sends_empty_object_by_default(client, fake_api) -> None:
    fake_api.add("POST", "linode/instances/123/reboot", {}, {})

    client.reboot_instance(123)
    client.reboot_instance(123, config_id=9)

    assert fake_api.calls[0]["body"] == {}
    assert fake_api.calls[1]["body"] == {"config_id": 9}


@pytest.mark.parametrize(("method", "action"), [("shutdown_instance", "shutdown"), ("mutate_instance", "mutate")])
def test_simple_actions(client, fake_api, method: str, action: str) -> None:
    fake_api.add("POST", f"linode/instances/123/{action}", None)

    assert getattr(client, method)(123) is None
    assert fake_api.calls[0]["method"] == "POST"
    assert fake_api.calls[0]["body"] is None


def test_clone_always_sends_backups_enabled(client, fake_api) -> None:
    fake_api.add("POST", "linode/instances/123/clone", _instance(id=124), _instance(id=125))

    clone = client.clone_instance(123, InstanceCloneOptions())
    client.clone_instance(123, InstanceCloneOptions(region="us-west", disks=[1, 2], backups_enabled=True))

    assert clone.id == 124
    assert fake_api.calls[0]["body"] == {"backups_enabled": False}
    assert fake_api.calls[1]["body"] == {"region": "us-west", "disks": [1, 2], "backups_enabled": True}


def test_rebuild_instance(client, fake_api) -> None:
    fake_api.add("POST", "linode/instances/123/rebuild", _instance(status="rebuilding"))

    instance = client.rebuild_instance(123, InstanceRebuildOptions(image="linode/debian12", root_pass="s3cret!pass"))

    assert instance.status == "rebuilding"
    assert fake_api.calls[0]["body"] == {"image": "linode/debian12", "root_pass": "s3cret!pass"}


def test_rescue_instance(client, fake_api) -> None:
    fake_api.add("POST", "linode/instances/123/rescue", {})

    client.rescue_instance(123, InstanceRescueOptions(devices={"sda": InstanceConfigDevice(disk_id=5), "sdb": InstanceConfigDevice(volume_id=8)}))

    assert fake_api.calls[0]["body"] == {"devices": {"sda": {"disk_id": 5}, "sdb": {"volume_id": 8}}}


def test_resize_instance(client, fake_api) -> None:
    fake_api.add("POST", "linode/instances/123/resize", {})

    client.resize_instance(
        123,
        InstanceResizeOptions(type="g6-standard-2", migration_type=InstanceMigrationType.WARM, allow_auto_disk_resize=False),
    )

    assert fake_api.calls[0]["body"] == {
        "type": "g6-standard-2",
        "migration_type": "warm",
        "allow_auto_disk_resize": False,
    }


def test_migrate_instance(client, fake_api) -> None:
    fake_api.add("POST", "linode/instances/123/migrate", {})

    client.migrate_instance(123, InstanceMigrateOptions(region="us-west"))

    assert fake_api.calls[0]["body"] == {"region": "us-west"}


def test_list_instances(client, fake_api) -> None:
    fake_api.add("GET", "linode/instances", {"data": [_instance(id=1), _instance(id=2)], "page": 1, "pages": 1, "results": 2})

    assert [i.id for i in client.list_instances()] == [1, 2]
