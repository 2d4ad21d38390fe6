from __future__ import annotations

from typing import List, Optional

from linode_sdk.context import RequestContext
from linode_sdk.models.placement_groups import (
    PlacementGroup,
    PlacementGroupAssignOptions,
    PlacementGroupCreateOptions,
    PlacementGroupUnAssignOptions,
    PlacementGroupUpdateOptions,
)
from linode_sdk.pagination import ListOptions, ListResult
from linode_sdk.resources.base import ResourceClient, format_api_path

PLACEMENT_GROUPS_PATH = "placement/groups"


class PlacementGroupsClient(ResourceClient):
    def list_placement_groups(self, options: Optional[ListOptions] = None, *, context: Optional[RequestContext] = None) -> List[PlacementGroup]:
        return self._list(PlacementGroup, PLACEMENT_GROUPS_PATH, options, context=context)

    def paginate_placement_groups(self, options: Optional[ListOptions] = None, *, context: Optional[RequestContext] = None) -> ListResult[PlacementGroup]:
        return self._paginate(PlacementGroup, PLACEMENT_GROUPS_PATH, options, context=context)

    def get_placement_group(self, group_id: int, *, context: Optional[RequestContext] = None) -> PlacementGroup:
        return self._get(PlacementGroup, format_api_path("placement/groups/{}", group_id), context=context)

    def create_placement_group(self, options: PlacementGroupCreateOptions, *, context: Optional[RequestContext] = None) -> PlacementGroup:
        return self._post(PlacementGroup, PLACEMENT_GROUPS_PATH, options, context=context)

    def update_placement_group(self, group_id: int, options: PlacementGroupUpdateOptions, *, context: Optional[RequestContext] = None) -> PlacementGroup:
        return self._put(PlacementGroup, format_api_path("placement/groups/{}", group_id), options, context=context)

    def assign_placement_group_linodes(self, group_id: int, options: PlacementGroupAssignOptions, *, context: Optional[RequestContext] = None) -> PlacementGroup:
        return self._post(PlacementGroup, format_api_path("placement/groups/{}/assign", group_id), options, context=context)

    def unassign_placement_group_linodes(self, group_id: int, options: PlacementGroupUnAssignOptions, *, context: Optional[RequestContext] = None) -> PlacementGroup:
        return self._post(PlacementGroup, format_api_path("placement/groups/{}/unassign", group_id), options, context=context)

    def delete_placement_group(self, group_id: int, *, context: Optional[RequestContext] = None) -> None:
        self._delete(format_api_path("placement/groups/{}", group_id), context=context)
