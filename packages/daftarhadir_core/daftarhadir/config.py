"""Sheet configuration: printed texts, fonts and colors."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Tuple, Union

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


SIGNATURE_ROLES = ("approver", "payment", "verification", "preparer")


@dataclass(slots=True)
class SignatureRole:
    """One column of the signature block."""
    heading: str
    title: str = ""
    name: str = ""


def _default_signatures() -> Dict[str, SignatureRole]:
    return {
        "approver": SignatureRole(
            heading="Mengetahui/Menyetujui:",
            title="Kepala Bagian Pengembangan Produk TI",
            name="Alfian Akbar Gozali",
        ),
        "payment": SignatureRole(heading="Fiat Bayar"),
        "verification": SignatureRole(heading="Verifikasi"),
        "preparer": SignatureRole(
            heading="Dibuat Oleh,",
            title="Staff Bagian Pengembangan Produk TI",
            name="Amira Nur Khalipah",
        ),
    }


@dataclass
class SheetConfig:
    """Everything printed on the sheet that does not come from the request."""

    title: str = "DAFTAR HADIR TENAGA LEPAS HARIAN (TLH)"
    institution: str = "TELKOM UNIVERSITY"
    city: str = "Bandung"
    signatures: Dict[str, SignatureRole] = field(default_factory=_default_signatures)

    font_name: str = "Helvetica"
    bold_font_name: str = "Helvetica-Bold"
    title_font_size: float = 12.0
    body_font_size: float = 10.0

    # RGB 0-255
    shade_color: Tuple[int, int, int] = (117, 117, 117)
    blank_color: Tuple[int, int, int] = (255, 255, 255)
    line_width_mm: float = 0.2

    name_wrap_width: int = 20

    def signature(self, role: str) -> SignatureRole:
        try:
            return self.signatures[role]
        except KeyError:
            raise ConfigurationError(f"Unknown signature role: {role}") from None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SheetConfig":
        """Build a config from a (partial) dictionary of overrides.

        Args:
            data: Mapping of field names to values. ``signatures`` may override
                single roles and single attributes of a role.

        Returns:
            SheetConfig with defaults for every key not given

        Raises:
            ConfigurationError: If a key or signature role is unknown
        """
        if not isinstance(data, dict):
            raise ConfigurationError("Configuration must be a JSON object")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown configuration keys: {', '.join(unknown)}",
                details={"unknown_keys": unknown},
            )

        config = cls()
        overrides = dict(data)

        signature_overrides = overrides.pop("signatures", None) or {}
        for role, values in signature_overrides.items():
            if role not in SIGNATURE_ROLES:
                raise ConfigurationError(f"Unknown signature role: {role}")
            if not isinstance(values, dict):
                raise ConfigurationError(f"Signature role {role} must be an object")
            for attribute, text in values.items():
                _check_text(f"signatures.{role}.{attribute}", text)
            try:
                config.signatures[role] = replace(config.signatures[role], **values)
            except TypeError as exc:
                raise ConfigurationError(
                    f"Invalid attributes for signature role {role}", cause=exc
                ) from exc

        for key, value in overrides.items():
            if key in COLOR_FIELDS:
                value = _parse_color(key, value)
            elif key in TEXT_FIELDS:
                value = _check_text(key, value, allow_empty=key not in FONT_FIELDS)
            elif key in SIZE_FIELDS:
                value = _check_positive_number(key, value)
            elif key == "name_wrap_width":
                if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                    raise ConfigurationError(
                        f"name_wrap_width must be a positive integer, got {value!r}"
                    )
            setattr(config, key, value)
        return config


TEXT_FIELDS = ("title", "institution", "city", "font_name", "bold_font_name")
FONT_FIELDS = ("font_name", "bold_font_name")
SIZE_FIELDS = ("title_font_size", "body_font_size", "line_width_mm")
COLOR_FIELDS = ("shade_color", "blank_color")


def _check_text(key: str, value: Any, allow_empty: bool = True) -> str:
    if not isinstance(value, str) or (not allow_empty and not value.strip()):
        kind = "string" if allow_empty else "non-empty string"
        raise ConfigurationError(f"{key} must be a {kind}, got {value!r}")
    return value


def _check_positive_number(key: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        raise ConfigurationError(f"{key} must be a positive number, got {value!r}")
    return float(value)


def _parse_color(key: str, value: Any) -> Tuple[int, int, int]:
    if isinstance(value, str):
        hex_color = value.lstrip("#")
        if len(hex_color) == 6:
            try:
                return tuple(int(hex_color[i:i + 2], 16) for i in (0, 2, 4))  # type: ignore[return-value]
            except ValueError:
                pass
    elif isinstance(value, (list, tuple)) and len(value) == 3:
        try:
            r, g, b = (int(c) for c in value)
        except (TypeError, ValueError):
            pass
        else:
            if all(0 <= c <= 255 for c in (r, g, b)):
                return (r, g, b)
    raise ConfigurationError(f"Invalid color for {key}: {value!r}")


def load_config(path: Union[str, Path]) -> SheetConfig:
    """Load a sheet configuration from a JSON file.

    Args:
        path: Path to JSON file

    Returns:
        SheetConfig with file values applied over defaults

    Raises:
        ConfigurationError: If the file cannot be read or parsed
    """
    config_path = Path(path)
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigurationError(
            f"Cannot read configuration file: {exc}", config_path=str(config_path), cause=exc
        ) from exc
    except json.JSONDecodeError as exc:
        raise ConfigurationError(
            f"Configuration file is not valid JSON: {exc}", config_path=str(config_path), cause=exc
        ) from exc

    logger.debug("Loaded sheet configuration from %s", config_path)
    return SheetConfig.from_dict(raw)
