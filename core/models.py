"""Core data models for single-host conversion."""

from dataclasses import dataclass, field
from pathlib import Path

from .errors import InvalidArgumentError

HOSTS = ("excel", "powerpoint", "xp")
COMBINED_HOST = "xp"
DEFAULT_DEBUG_HOST = "excel"
JSON_MANIFEST = "json"
XML_MANIFEST = "xml"


@dataclass(frozen=True)
class ConversionOptions:
    """Arguments for one conversion run, fixed at entry."""

    host: str
    manifest_format: str
    project_name: str | None = None
    app_id: str | None = None
    root: Path = Path(".")

    @classmethod
    def from_args(
        cls,
        host: str | None,
        manifest_format: str,
        project_name: str | None = None,
        app_id: str | None = None,
        root: Path | str = ".",
    ) -> "ConversionOptions":
        """Validate the host and build options.

        Raises:
            InvalidArgumentError: If the host is missing or unsupported.
        """
        if not host:
            raise InvalidArgumentError("The host was not provided.")
        if host not in HOSTS:
            raise InvalidArgumentError(f"'{host}' is not a supported host.")

        return cls(
            host=host,
            manifest_format=manifest_format,
            project_name=project_name or None,
            app_id=app_id or None,
            root=Path(root),
        )

    @property
    def target_hosts(self) -> list[str]:
        """Concrete hosts kept in the project."""
        if self.host == COMBINED_HOST:
            return ["excel", "powerpoint"]
        return [self.host]

    @property
    def debug_host(self) -> str:
        if self.host == COMBINED_HOST:
            return DEFAULT_DEBUG_HOST
        return self.host

    @property
    def is_json_manifest(self) -> bool:
        return self.manifest_format == JSON_MANIFEST

    @property
    def manifest_path(self) -> str:
        """Manifest handed to the manifest-editing tool."""
        return f"manifest.{JSON_MANIFEST if self.is_json_manifest else XML_MANIFEST}"

    def path(self, relative: str) -> Path:
        """Resolve a project-relative path against the root."""
        return self.root / relative


@dataclass
class StageResult:
    """Outcome of one conversion stage."""

    name: str
    error: str | None = None
    notes: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None
