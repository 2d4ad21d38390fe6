from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import Field, IPvAnyAddress, field_validator

from linode_sdk.decoders import parse_timestamp
from linode_sdk.models.base import OptionsRecord, Record
from linode_sdk.types import InstanceMigrationType, OpenAffinityType, OpenInstanceStatus


class InstanceSpec(Record):
    disk: int = 0
    memory: int = 0
    vcpus: int = 0
    transfer: int = 0
    gpus: int = 0


class InstanceAlert(Record):
    cpu: int = 0
    io: int = 0
    network_in: int = 0
    network_out: int = 0
    transfer_quota: int = 0


class InstanceBackupSchedule(Record):
    day: Optional[str] = None
    window: Optional[str] = None


class InstanceBackup(Record):
    # available and enabled are read-only on the API side.
    available: Optional[bool] = None
    enabled: Optional[bool] = None
    schedule: Optional[InstanceBackupSchedule] = None


class InstanceTransfer(Record):
    used: int = 0
    billable: int = 0
    quota: int = 0


class InstancePlacementGroup(Record):
    id: int
    label: Optional[str] = None
    affinity_type: Optional[OpenAffinityType] = None
    is_strict: bool = False


class InstanceUpdateOptions(OptionsRecord):
    label: Optional[str] = None
    backups: Optional[InstanceBackup] = None
    alerts: Optional[InstanceAlert] = None
    watchdog_enabled: Optional[bool] = None
    tags: Optional[List[str]] = None
    # Deprecated by the API; kept for accounts that still group Linodes.
    group: Optional[str] = None


class Instance(Record):
    id: int
    created: Optional[datetime] = None
    updated: Optional[datetime] = None
    region: Optional[str] = None
    alerts: Optional[InstanceAlert] = None
    backups: Optional[InstanceBackup] = None
    image: Optional[str] = None
    group: Optional[str] = None
    ipv4: List[IPvAnyAddress] = Field(default_factory=list)
    ipv6: Optional[str] = None
    label: Optional[str] = None
    type: Optional[str] = None
    status: Optional[OpenInstanceStatus] = None
    has_user_data: bool = False
    hypervisor: Optional[str] = None
    host_uuid: Optional[str] = None
    specs: Optional[InstanceSpec] = None
    watchdog_enabled: bool = False
    tags: List[str] = Field(default_factory=list)
    placement_group: Optional[InstancePlacementGroup] = None

    @field_validator("created", "updated", mode="before")
    @classmethod
    def _parse_timestamps(cls, value: Any) -> Optional[datetime]:
        return parse_timestamp(value)

    def get_update_options(self) -> InstanceUpdateOptions:
        return InstanceUpdateOptions(
            label=self.label,
            group=self.group or "",
            backups=self.backups,
            alerts=self.alerts,
            watchdog_enabled=self.watchdog_enabled,
            tags=list(self.tags),
        )


class InstanceMetadataOptions(OptionsRecord):
    # Base64-encoded.
    user_data: Optional[str] = None


class InstanceCreatePlacementGroupOptions(OptionsRecord):
    id: int
    compliant_only: Optional[bool] = None


class InstanceConfigInterfaceCreateOptions(OptionsRecord):
    purpose: Literal["public", "vlan", "vpc"]
    label: Optional[str] = None
    ipam_address: Optional[str] = None
    subnet_id: Optional[int] = None
    primary: Optional[bool] = None
    ip_ranges: Optional[List[str]] = None


class InstanceConfigDevice(OptionsRecord):
    disk_id: Optional[int] = None
    volume_id: Optional[int] = None


class InstanceCreateOptions(OptionsRecord):
    region: str
    type: str
    label: Optional[str] = None
    root_pass: Optional[str] = None
    authorized_keys: Optional[List[str]] = None
    authorized_users: Optional[List[str]] = None
    stackscript_id: Optional[int] = None
    stackscript_data: Optional[Dict[str, str]] = None
    backup_id: Optional[int] = None
    image: Optional[str] = None
    interfaces: Optional[List[InstanceConfigInterfaceCreateOptions]] = None
    backups_enabled: Optional[bool] = None
    private_ip: Optional[bool] = None
    tags: Optional[List[str]] = None
    metadata: Optional[InstanceMetadataOptions] = None
    firewall_id: Optional[int] = None
    placement_group: Optional[InstanceCreatePlacementGroupOptions] = None
    swap_size: Optional[int] = None
    booted: Optional[bool] = None
    group: Optional[str] = None


class InstanceCloneOptions(OptionsRecord):
    region: Optional[str] = None
    type: Optional[str] = None
    # Existing Linode to clone into instead of creating a new one.
    linode_id: Optional[int] = None
    label: Optional[str] = None
    backups_enabled: bool = False
    disks: Optional[List[int]] = None
    configs: Optional[List[int]] = None
    private_ip: Optional[bool] = None
    metadata: Optional[InstanceMetadataOptions] = None
    placement_group: Optional[InstanceCreatePlacementGroupOptions] = None
    group: Optional[str] = None


class InstanceRebuildOptions(OptionsRecord):
    image: Optional[str] = None
    root_pass: Optional[str] = None
    authorized_keys: Optional[List[str]] = None
    authorized_users: Optional[List[str]] = None
    stackscript_id: Optional[int] = None
    stackscript_data: Optional[Dict[str, str]] = None
    booted: Optional[bool] = None
    metadata: Optional[InstanceMetadataOptions] = None
    type: Optional[str] = None


class InstanceRescueOptions(OptionsRecord):
    # Keyed by device slot, sda through sdh.
    devices: Dict[str, InstanceConfigDevice] = Field(default_factory=dict)


class InstanceResizeOptions(OptionsRecord):
    type: str
    migration_type: Optional[InstanceMigrationType] = None
    allow_auto_disk_resize: Optional[bool] = None


class InstanceMigrateOptions(OptionsRecord):
    type: Optional[InstanceMigrationType] = None
    region: Optional[str] = None
    placement_group: Optional[InstanceCreatePlacementGroupOptions] = None
