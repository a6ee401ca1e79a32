"""
Base class for API resource groups.

Each resource group is a thin set of methods mapping one operation to one
fixed endpoint path; all HTTP work is delegated to the RequestExecutor.
"""

from typing import Any, Mapping

from crawlkit.api.executor import RequestExecutor, ResourceConfig


class BaseResource:
    """
    Common plumbing for resource groups.

    Holds a read-only reference to the client's ResourceConfig.
    """

    def __init__(self, config: ResourceConfig) -> None:
        self._config = config
        self._executor = RequestExecutor(config)

    @property
    def config(self) -> ResourceConfig:
        return self._config

    async def _post(self, endpoint: str, body: Mapping[str, Any]) -> Any:
        return await self._executor.execute("POST", endpoint, body=body)
