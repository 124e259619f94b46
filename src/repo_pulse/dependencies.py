"""Dependency audit report consumed by the suggestion engine.

The audit itself (package resolution, advisory lookup, license scanning) is
done elsewhere; this module only models its result and reads it from JSON.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Union

from .exceptions import DependencyReportError


class DependencyType(Enum):
    RUNTIME = "runtime"
    DEVELOPMENT = "development"
    PEER = "peer"


class Severity(Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Compliance(Enum):
    OK = "ok"
    WARNING = "warning"
    ERROR = "error"
    UNKNOWN = "unknown"

    @property
    def is_issue(self) -> bool:
        return self in (Compliance.WARNING, Compliance.ERROR)


# Older audit exports spell the clean state "good"
_COMPLIANCE_ALIASES = {"good": Compliance.OK}


@dataclass(frozen=True)
class Dependency:
    name: str
    version: str = ""
    type: DependencyType = DependencyType.RUNTIME


@dataclass(frozen=True)
class Vulnerability:
    package: str
    severity: Severity
    version: str = ""
    description: str = ""


@dataclass(frozen=True)
class LicenseInfo:
    package: str
    license: str = ""
    compliance: Compliance = Compliance.UNKNOWN


@dataclass(frozen=True)
class DependencyStats:
    total: int
    runtime: int
    development: int
    peer: int
    vulnerable: int
    license_issues: int


@dataclass(frozen=True)
class DependencyReport:
    dependencies: tuple[Dependency, ...] = ()
    vulnerabilities: tuple[Vulnerability, ...] = ()
    licenses: tuple[LicenseInfo, ...] = ()

    def vulnerabilities_with(self, severity: Severity) -> list[Vulnerability]:
        return [v for v in self.vulnerabilities if v.severity is severity]

    @property
    def license_issues(self) -> list[LicenseInfo]:
        return [lic for lic in self.licenses if lic.compliance.is_issue]

    def stats(self) -> DependencyStats:
        by_type = {t: 0 for t in DependencyType}
        for dep in self.dependencies:
            by_type[dep.type] += 1
        return DependencyStats(
            total=len(self.dependencies),
            runtime=by_type[DependencyType.RUNTIME],
            development=by_type[DependencyType.DEVELOPMENT],
            peer=by_type[DependencyType.PEER],
            vulnerable=len(self.vulnerabilities),
            license_issues=len(self.license_issues),
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DependencyReport:
        try:
            return cls(
                dependencies=tuple(
                    Dependency(
                        name=str(d["name"]),
                        version=str(d.get("version", "")),
                        type=DependencyType(d.get("type", "runtime")),
                    )
                    for d in data.get("dependencies") or []
                ),
                vulnerabilities=tuple(
                    Vulnerability(
                        package=str(v.get("package", "")),
                        severity=Severity(str(v["severity"]).lower()),
                        version=str(v.get("version", "")),
                        description=str(v.get("description", "")),
                    )
                    for v in data.get("vulnerabilities") or []
                ),
                licenses=tuple(
                    LicenseInfo(
                        package=str(lic.get("package", "")),
                        license=str(lic.get("license", "")),
                        compliance=_parse_compliance(lic.get("compliance", "unknown")),
                    )
                    for lic in data.get("licenses") or []
                ),
            )
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            raise DependencyReportError(str(e)) from e


def _parse_compliance(value: Any) -> Compliance:
    text = str(value).lower()
    if text in _COMPLIANCE_ALIASES:
        return _COMPLIANCE_ALIASES[text]
    return Compliance(text)


def load_dependency_report(path: Union[str, Path]) -> DependencyReport:
    """Read an audit report from a JSON file."""
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise DependencyReportError(f"{path}: {e}") from e

    if not isinstance(data, dict):
        raise DependencyReportError(f"{path}: expected a JSON object")
    return DependencyReport.from_dict(data)
