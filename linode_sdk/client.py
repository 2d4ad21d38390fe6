from __future__ import annotations

from typing import Optional

from linode_sdk.config import DEFAULT_API_VERSION, DEFAULT_BASE_URL, ClientConfig
from linode_sdk.http import DEFAULT_USER_AGENT, HttpClient, LogFn
from linode_sdk.resources.account_events import AccountEventsClient
from linode_sdk.resources.instances import InstancesClient
from linode_sdk.resources.placement_groups import PlacementGroupsClient


class LinodeClient(InstancesClient, AccountEventsClient, PlacementGroupsClient):
    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        api_version: str = DEFAULT_API_VERSION,
        timeout: float = 30,
        max_retries: int = 3,
        backoff_base_seconds: float = 0.25,
        ca_file: Optional[str] = None,
        user_agent: str = DEFAULT_USER_AGENT,
        logger: Optional[LogFn] = None,
    ):
        self.config = ClientConfig(
            token=token,
            base_url=base_url,
            api_version=api_version,
            timeout=timeout,
            max_retries=max_retries,
            backoff_base_seconds=backoff_base_seconds,
            ca_file=ca_file,
        )
        self._http = HttpClient(
            self.config.api_root,
            token,
            timeout=timeout,
            max_retries=max_retries,
            backoff_base_seconds=backoff_base_seconds,
            ca_file=ca_file,
            user_agent=user_agent,
            logger=logger,
        )

    @classmethod
    def from_config(cls, config: ClientConfig, logger: Optional[LogFn] = None) -> "LinodeClient":
        return cls(
            config.token,
            base_url=config.base_url,
            api_version=config.api_version,
            timeout=config.timeout,
            max_retries=config.max_retries,
            backoff_base_seconds=config.backoff_base_seconds,
            ca_file=config.ca_file,
            logger=logger,
        )

    @classmethod
    def from_env(cls, logger: Optional[LogFn] = None) -> "LinodeClient":
        return cls.from_config(ClientConfig.from_env(), logger=logger)

    @property
    def http(self) -> HttpClient:
        return self._http
