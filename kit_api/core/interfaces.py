# kit_api/core/interfaces.py
"""
Interfaces the core consumes and exposes.
Each interface has a single, focused responsibility.
"""

from typing import Any, Dict, List, Optional, Protocol, Union


class IConfigProvider(Protocol):
    """Interface for configuration providers"""

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value"""
        ...

    def get_required(self, key: str) -> Any:
        """Get required configuration value"""
        ...


class IStoreProbe(Protocol):
    """Anything that can run a trivial query against the persistent store"""

    def execute(self, query: str, params: tuple = None) -> List[Any]:
        ...


class IAuthProbe(Protocol):
    """Anything that can self-check the credential subsystem"""

    def describe_capabilities(self) -> Dict[str, Any]:
        """Fails when the stored key material is unusable"""
        ...


class IEmailProvider(Protocol):
    """Interface for email transports"""

    def send(
        self,
        to: Union[str, List[str]],
        from_: str,
        subject: str,
        html: str,
        text: Optional[str] = None,
        reply_to: Optional[str] = None,
    ) -> None:
        """Send an email"""
        ...


class IHealthChecker(Protocol):
    """Interface for health checking"""

    def run_startup_checks(self) -> None:
        """Probe every dependency once"""
        ...

    def get_health(self) -> Dict[str, Any]:
        """Report the last recorded health"""
        ...
