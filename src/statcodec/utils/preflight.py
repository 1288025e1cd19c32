"""Preflight validation of codec libraries.

Each serialization format depends on an optional Python package installed
through a pip extra. Availability is checked once at startup with
``importlib.util.find_spec`` and never re-checked while converting, so the
set of usable formats is fixed for the process lifetime.
"""

import importlib.util
from collections.abc import Collection
from dataclasses import dataclass, field
from typing import Any

from statcodec.codecs.registry import CodecRegistry, FormatSpec

PACKAGE_NAME = "statcodec"


def install_command(feature: str) -> str:
    """Return the pip command that installs a feature extra."""
    return f"pip install --upgrade '{PACKAGE_NAME}[{feature}]'"


@dataclass
class CodecCheck:
    """Result of checking a single format.

    Attributes:
        name: Format name
        available: Whether every required module is importable
        version: Version of the first required module, if it exposes one
        required: Whether the format is enabled in configuration
        path: Location of the first required module
        missing: Modules that could not be found
        message: Status message (human-readable context)
    """

    name: str
    available: bool
    version: str | None = None
    required: bool = True
    path: str | None = None
    missing: list[str] = field(default_factory=list)
    message: str = ""


@dataclass
class PreflightResult:
    """Result of preflight validation.

    Attributes:
        success: Whether every configured format is usable
        checks: Individual format check results
        errors: Messages for configured formats that cannot be used
        warnings: Messages for formats that are neither configured nor installed
    """

    success: bool = True
    checks: list[CodecCheck] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def add_check(self, check: CodecCheck) -> None:
        """Add a format check result."""
        self.checks.append(check)

        if not check.available:
            if check.required:
                self.success = False
                self.errors.append(f"Configured format unavailable: {check.name}")
            else:
                self.warnings.append(f"Optional format not installed: {check.name}")

    def get(self, name: str) -> CodecCheck | None:
        """Look up the check for a format."""
        for check in self.checks:
            if check.name == name:
                return check
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "success": self.success,
            "checks": [
                {
                    "name": c.name,
                    "available": c.available,
                    "version": c.version,
                    "required": c.required,
                    "path": c.path,
                    "missing": c.missing,
                    "message": c.message,
                }
                for c in self.checks
            ],
            "errors": self.errors,
            "warnings": self.warnings,
        }


class PreflightChecker:
    """Validates codec library availability before any conversion.

    Usage:
        checker = PreflightChecker()
        result = checker.check_all(get_registry())
        if not result.success:
            raise typer.Exit(1)
    """

    def check_module(self, module: str) -> tuple[bool, str | None]:
        """Check if a module is importable without importing it.

        Args:
            module: Top-level module name

        Returns:
            Tuple of (available, origin path)
        """
        try:
            spec = importlib.util.find_spec(module)
        except (ImportError, ValueError):
            return False, None
        if spec is None:
            return False, None
        return True, spec.origin

    def get_module_version(self, module: str) -> str | None:
        """Get ``__version__`` of an installed module, if it has one."""
        try:
            imported = importlib.import_module(module)
        except ImportError:
            return None
        return getattr(imported, "__version__", None)

    def check_format(self, spec: FormatSpec, required: bool = True) -> CodecCheck:
        """Check that a format's required modules are installed.

        Args:
            spec: Format declaration
            required: Whether configuration asks for this format

        Returns:
            CodecCheck result
        """
        missing: list[str] = []
        first_path: str | None = None
        for module in spec.requires:
            available, path = self.check_module(module)
            if not available:
                missing.append(module)
            elif first_path is None:
                first_path = path

        if missing:
            return CodecCheck(
                name=spec.name,
                available=False,
                required=required,
                missing=missing,
                message=f"Install with: {install_command(spec.feature)}",
            )

        version = self.get_module_version(spec.requires[0]) if spec.requires else None
        return CodecCheck(
            name=spec.name,
            available=True,
            version=version,
            required=required,
            path=first_path,
            message=spec.description or spec.name,
        )

    def check_all(
        self,
        registry: CodecRegistry,
        required: Collection[str] = (),
        skip: Collection[str] = (),
    ) -> PreflightResult:
        """Check every registered format.

        Args:
            registry: Formats to check, in catalog order
            required: Formats that must be usable (explicitly enabled in config)
            skip: Formats not to check (switched off in config)

        Returns:
            PreflightResult with one check per checked format
        """
        result = PreflightResult()
        for spec in registry:
            if spec.name in skip:
                continue
            result.add_check(self.check_format(spec, required=spec.name in required))
        return result
