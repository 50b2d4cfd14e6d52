"""Application configuration.

AppConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(root="site", app_dir="application", debug=True)
    """

    # Project root; everything below is resolved against it
    root: str | Path = "."

    # Directory holding models/, views/, controllers/, libraries/, ...
    app_dir: str | Path = "application"

    # Static document served with 404 responses (None = empty body)
    not_found_page: str | Path | None = "404.html"

    # Views
    view_extension: str = ".html"
    autoescape: bool = True
    trim_blocks: bool = True
    lstrip_blocks: bool = True

    debug: bool = False

    # Component cache scope. False keeps loaded files and instances for the
    # life of the App (per process), where components sharing a last name
    # segment (admin/home, home) share one instance. True drops transient
    # instances before every request; singletons and loaded files are kept.
    per_request_components: bool = False

    @property
    def app_path(self) -> Path:
        """Absolute path of the application directory."""
        return (Path(self.root) / self.app_dir).resolve()

    @property
    def not_found_path(self) -> Path | None:
        """Absolute path of the 404 document, if one is configured."""
        if self.not_found_page is None:
            return None
        return (Path(self.root) / self.not_found_page).resolve()
