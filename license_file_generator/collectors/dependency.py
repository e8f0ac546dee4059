"""Transitive dependency resolution against installed distributions."""
from importlib.metadata import Distribution, distributions
from typing import Optional

from packaging.requirements import InvalidRequirement, Requirement
from packaging.utils import canonicalize_name

# Marker "extra" value for a distribution's unconditional requirements
_BASE = ""


class DependencyResolver:
    """Resolves the installed distributions a set of requirements pulls in."""

    def __init__(self, path: Optional[list[str]] = None) -> None:
        """Initialize resolver with package index.

        Args:
            path: Directories to search for distributions. Defaults to
                sys.path of the running interpreter.
        """
        found = distributions(path=path) if path is not None else distributions()
        self._installed: dict[str, Distribution] = {}
        for dist in found:
            name = dist.metadata.get("Name")
            if name:
                # First match wins, as with the import system
                self._installed.setdefault(self._normalize(name), dist)

    @staticmethod
    def _normalize(name: str) -> str:
        """Normalize package name per PEP 503."""
        return canonicalize_name(name)

    def get_installed_packages(self) -> list[Distribution]:
        """Get all installed distributions, sorted by normalized name."""
        return [self._installed[key] for key in sorted(self._installed)]

    def resolve(
        self,
        requirements: list[str],
        exclude: Optional[str] = None,
    ) -> list[Distribution]:
        """Collect the installed distributions reachable from requirements.

        Environment markers are evaluated against the running interpreter.
        Requirements that only apply to an extra are followed when that
        extra was requested (e.g. `httpx[http2]`). Requirements that are
        malformed or not installed are skipped.

        Args:
            requirements: Root requirement strings (PEP 508).
            exclude: Distribution name to leave out, usually the project itself.

        Returns:
            Distributions in discovery order, each at most once.
        """
        found: dict[str, Distribution] = {}
        extras_seen: dict[str, set[str]] = {}

        for req_str in requirements:
            req = self._parse(req_str)
            if req is None:
                continue
            if req.marker and not req.marker.evaluate({"extra": _BASE}):
                continue
            self._visit(req, found, extras_seen)

        if exclude is not None:
            found.pop(self._normalize(exclude), None)
        return list(found.values())

    def _visit(
        self,
        req: Requirement,
        found: dict[str, Distribution],
        extras_seen: dict[str, set[str]],
    ) -> None:
        """Add a requirement's distribution and walk its requirements.

        Args:
            req: Requirement to satisfy.
            found: Accumulates visited distributions by normalized name.
            extras_seen: Extras already walked per normalized name.
        """
        normalized = self._normalize(req.name)
        dist = self._installed.get(normalized)
        if dist is None:
            return  # Package not installed

        requested = {canonicalize_name(extra) for extra in req.extras}
        walked = extras_seen.get(normalized)
        if walked is None:
            found[normalized] = dist
            walked = extras_seen[normalized] = set()
            pending = requested | {_BASE}
        else:
            pending = requested - walked
        if not pending:
            return
        walked.update(pending)

        for child_str in dist.requires or []:
            child = self._parse(child_str)
            if child is None:
                continue
            if child.marker is None:
                applies = _BASE in pending
            else:
                applies = any(
                    child.marker.evaluate({"extra": extra}) for extra in pending
                )
            if applies:
                self._visit(child, found, extras_seen)

    @staticmethod
    def _parse(req_str: str) -> Optional[Requirement]:
        try:
            return Requirement(req_str)
        except InvalidRequirement:
            return None
