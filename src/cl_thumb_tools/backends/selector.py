"""Image backend discovery with a fixed, configurable fallback order.

The first candidate whose Python binding is importable wins:

    gmagick (pgmagick) -> imagick (wand) -> gd2 (Pillow)

The selected handle is memoized for the lifetime of the process.
"""

import threading
from collections.abc import Callable, Iterable
from importlib.util import find_spec
from typing import ClassVar, NamedTuple

from loguru import logger
from pydantic import BaseModel, ConfigDict

from ..common.config import ThumbConfig
from ..common.errors import UnsupportedBackendError
from ..common.schemas import BackendId

# Python binding providing each backend
BACKEND_MODULES: dict[BackendId, str] = {
    BackendId.GMAGICK: "pgmagick",
    BackendId.IMAGICK: "wand",
    BackendId.GD2: "PIL",
}


class BackendHandle(BaseModel):
    """Immutable handle naming the selected image backend."""

    backend_id: BackendId
    module_name: str

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")


class BackendCandidate(NamedTuple):
    backend_id: BackendId
    probe: Callable[[], bool]
    construct: Callable[[], BackendHandle]


def module_available(module_name: str) -> bool:
    """True when ``module_name`` can be imported, without importing it."""
    try:
        return find_spec(module_name) is not None
    except (ImportError, ValueError):
        return False


def default_candidates(order: Iterable[BackendId]) -> list[BackendCandidate]:
    """Build probing candidates for ``order`` from the known bindings."""
    candidates: list[BackendCandidate] = []
    for backend_id in order:
        module_name = BACKEND_MODULES[backend_id]
        candidates.append(
            BackendCandidate(
                backend_id=backend_id,
                probe=lambda name=module_name: module_available(name),
                construct=lambda bid=backend_id, name=module_name: BackendHandle(
                    backend_id=bid, module_name=name
                ),
            )
        )
    return candidates


class BackendSelector:
    """Probes candidates in order and memoizes the first available backend.

    Thread-safe: concurrent first callers probe once and share one handle.
    A failed selection is not cached.
    """

    def __init__(
        self,
        config: ThumbConfig | None = None,
        candidates: Iterable[BackendCandidate] | None = None,
    ) -> None:
        self.config: ThumbConfig = config or ThumbConfig()
        if candidates is None:
            self.candidates: list[BackendCandidate] = default_candidates(
                self.config.preferred_backend_order
            )
        else:
            self.candidates = list(candidates)
        self._handle: BackendHandle | None = None
        self._lock: threading.Lock = threading.Lock()

    @property
    def handle(self) -> BackendHandle | None:
        """Selected handle, or None before the first successful select()."""
        return self._handle

    def select(self) -> BackendHandle:
        """Return the memoized backend handle, probing on first use.

        Raises:
            UnsupportedBackendError: If no candidate is available
        """
        handle = self._handle
        if handle is not None:
            return handle

        with self._lock:
            if self._handle is None:
                self._handle = self._probe()
            return self._handle

    def _probe(self) -> BackendHandle:
        attempted: list[str] = []

        for candidate in self.candidates:
            attempted.append(str(candidate.backend_id))
            if candidate.probe():
                handle = candidate.construct()
                logger.info(f"Using image backend: {candidate.backend_id}")
                return handle
            logger.debug(f"Image backend not available: {candidate.backend_id}")

        logger.error(f"No image backend available (tried: {', '.join(attempted)})")
        raise UnsupportedBackendError(attempted)


# Process-wide selector shared by select_backend()
_default_selector: BackendSelector | None = None
_default_selector_lock = threading.Lock()


def get_backend_selector() -> BackendSelector:
    """Get the process-wide selector, configured from the environment.

    Returns:
        BackendSelector instance
    """
    global _default_selector
    if _default_selector is None:
        with _default_selector_lock:
            if _default_selector is None:
                _default_selector = BackendSelector(ThumbConfig.from_env())
    return _default_selector


def select_backend() -> BackendHandle:
    """Return the process-wide backend handle, probing once on first use."""
    return get_backend_selector().select()
