from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from linode_sdk.models.base import OptionsRecord, Record
from linode_sdk.types import OpenAffinityType, PlacementGroupAffinityType


class PlacementGroupMember(Record):
    linode_id: int
    is_compliant: bool = False


class PlacementGroup(Record):
    id: int
    label: Optional[str] = None
    region: Optional[str] = None
    affinity_type: Optional[OpenAffinityType] = None
    is_compliant: bool = False
    is_strict: bool = False
    members: List[PlacementGroupMember] = Field(default_factory=list)


class PlacementGroupCreateOptions(OptionsRecord):
    label: str
    region: str
    affinity_type: PlacementGroupAffinityType = PlacementGroupAffinityType.ANTI_AFFINITY_LOCAL
    is_strict: bool = False


class PlacementGroupUpdateOptions(OptionsRecord):
    label: Optional[str] = None


class PlacementGroupAssignOptions(OptionsRecord):
    linodes: List[int]
    compliant_only: Optional[bool] = None


class PlacementGroupUnAssignOptions(OptionsRecord):
    linodes: List[int]
