from __future__ import annotations

from typing import List, Optional

from linode_sdk.context import RequestContext
from linode_sdk.models.instances import (
    Instance,
    InstanceCloneOptions,
    InstanceCreateOptions,
    InstanceMigrateOptions,
    InstanceRebuildOptions,
    InstanceRescueOptions,
    InstanceResizeOptions,
    InstanceTransfer,
    InstanceUpdateOptions,
)
from linode_sdk.pagination import ListOptions, ListResult
from linode_sdk.resources.base import ResourceClient, format_api_path

INSTANCES_PATH = "linode/instances"


class InstancesClient(ResourceClient):
    def list_instances(self, options: Optional[ListOptions] = None, *, context: Optional[RequestContext] = None) -> List[Instance]:
        return self._list(Instance, INSTANCES_PATH, options, context=context)

    def paginate_instances(self, options: Optional[ListOptions] = None, *, context: Optional[RequestContext] = None) -> ListResult[Instance]:
        return self._paginate(Instance, INSTANCES_PATH, options, context=context)

    def get_instance(self, linode_id: int, *, context: Optional[RequestContext] = None) -> Instance:
        return self._get(Instance, format_api_path("linode/instances/{}", linode_id), context=context)

    def get_instance_transfer(self, linode_id: int, *, context: Optional[RequestContext] = None) -> InstanceTransfer:
        """Network transfer used by the Linode during the current billing month."""
        return self._get(InstanceTransfer, format_api_path("linode/instances/{}/transfer", linode_id), context=context)

    def create_instance(self, options: InstanceCreateOptions, *, context: Optional[RequestContext] = None) -> Instance:
        return self._post(Instance, INSTANCES_PATH, options, context=context)

    def update_instance(self, linode_id: int, options: InstanceUpdateOptions, *, context: Optional[RequestContext] = None) -> Instance:
        return self._put(Instance, format_api_path("linode/instances/{}", linode_id), options, context=context)

    def rename_instance(self, linode_id: int, label: str, *, context: Optional[RequestContext] = None) -> Instance:
        return self.update_instance(linode_id, InstanceUpdateOptions(label=label), context=context)

    def delete_instance(self, linode_id: int, *, context: Optional[RequestContext] = None) -> None:
        self._delete(format_api_path("linode/instances/{}", linode_id), context=context)

    def boot_instance(self, linode_id: int, config_id: int = 0, *, context: Optional[RequestContext] = None) -> None:
        """Boots the Linode. A ``config_id`` of 0 lets the API pick the last booted config."""
        body = {"config_id": config_id} if config_id else None
        self._action(format_api_path("linode/instances/{}/boot", linode_id), body, context=context)

    def reboot_instance(self, linode_id: int, config_id: int = 0, *, context: Optional[RequestContext] = None) -> None:
        body = {"config_id": config_id} if config_id else {}
        self._action(format_api_path("linode/instances/{}/reboot", linode_id), body, context=context)

    def clone_instance(self, linode_id: int, options: InstanceCloneOptions, *, context: Optional[RequestContext] = None) -> Instance:
        """Copies the Linode's disks and configuration profiles to a new or existing Linode."""
        return self._post(Instance, format_api_path("linode/instances/{}/clone", linode_id), options, context=context)

    def rebuild_instance(self, linode_id: int, options: InstanceRebuildOptions, *, context: Optional[RequestContext] = None) -> Instance:
        """Deletes all disks and configs on the Linode and deploys a fresh image."""
        return self._post(Instance, format_api_path("linode/instances/{}/rebuild", linode_id), options, context=context)

    def rescue_instance(self, linode_id: int, options: InstanceRescueOptions, *, context: Optional[RequestContext] = None) -> None:
        self._action(format_api_path("linode/instances/{}/rescue", linode_id), options, context=context)

    def resize_instance(self, linode_id: int, options: InstanceResizeOptions, *, context: Optional[RequestContext] = None) -> None:
        self._action(format_api_path("linode/instances/{}/resize", linode_id), options, context=context)

    def migrate_instance(self, linode_id: int, options: InstanceMigrateOptions, *, context: Optional[RequestContext] = None) -> None:
        self._action(format_api_path("linode/instances/{}/migrate", linode_id), options, context=context)

    def shutdown_instance(self, linode_id: int, *, context: Optional[RequestContext] = None) -> None:
        self._simple_instance_action("shutdown", linode_id, context=context)

    def mutate_instance(self, linode_id: int, *, context: Optional[RequestContext] = None) -> None:
        """Upgrades the Linode to its next generation plan."""
        self._simple_instance_action("mutate", linode_id, context=context)

    def _simple_instance_action(self, action: str, linode_id: int, *, context: Optional[RequestContext] = None) -> None:
        self._action(format_api_path("linode/instances/{}/{}", linode_id, action), context=context)
