from dataclasses import dataclass, fields
from pathlib import Path
from typing import NoReturn, TypedDict, cast

import yaml

from .models import Options


class RawReportConfig(TypedDict):
    types: bool
    size: bool
    permissions: bool
    dates: bool
    links: bool
    verbose: bool
    human: bool
    all: bool


class RawConfigFile(TypedDict):
    config: RawReportConfig


def type_error(value: object) -> NoReturn:
    raise TypeError(f"Unexpected value of wrong type: {value!r}")


@dataclass(slots=True)
class ReportConfig:
    types: bool = False
    size: bool = False
    permissions: bool = False
    dates: bool = False
    links: bool = False
    verbose: bool = False
    human: bool = False
    all: bool = False

    @staticmethod
    def load(path: Path) -> "ReportConfig":
        if not path.exists():
            raise FileNotFoundError(f"Missing config file: {path}")

        with path.open("r", encoding="UTF-8") as f:
            raw_loaded_obj: object | None = cast(object, yaml.safe_load(f))

        if not raw_loaded_obj:
            raise ValueError("Config file is empty or invalid YAML.")

        if not isinstance(raw_loaded_obj, dict):
            type_error(raw_loaded_obj)

        raw_dict: dict[str, object] = cast(dict[str, object], raw_loaded_obj)

        cfg_raw: object | None = raw_dict.get("config")
        if not isinstance(cfg_raw, dict):
            type_error(cfg_raw)

        cfg: dict[str, object] = cast(dict[str, object], cfg_raw)

        reportConfig: ReportConfig = ReportConfig()
        for field in fields(ReportConfig):
            value: object = cfg.get(field.name, False)
            if not isinstance(value, bool):
                type_error(value)
            setattr(reportConfig, field.name, value)

        return reportConfig

    def save(self, path: Path) -> None:
        raw: RawConfigFile = {"config": self.to_raw()}
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(raw, f, sort_keys=False)

    def to_raw(self) -> RawReportConfig:
        return {
            "types": self.types,
            "size": self.size,
            "permissions": self.permissions,
            "dates": self.dates,
            "links": self.links,
            "verbose": self.verbose,
            "human": self.human,
            "all": self.all,
        }

    def to_options(self) -> Options:
        return Options(**self.to_raw())

    def merge(self, options: Options) -> Options:
        """
        Combine config defaults with command-line flags.

        A flag given on the command line switches its option on; it can
        never switch off something the config file enabled.
        """
        defaults: Options = self.to_options()
        return Options(
            types=defaults.types or options.types,
            size=defaults.size or options.size,
            permissions=defaults.permissions or options.permissions,
            dates=defaults.dates or options.dates,
            links=defaults.links or options.links,
            verbose=defaults.verbose or options.verbose,
            human=defaults.human or options.human,
            all=defaults.all or options.all,
        )

    @staticmethod
    def from_options(options: Options) -> "ReportConfig":
        return ReportConfig(
            types=options.types,
            size=options.size,
            permissions=options.permissions,
            dates=options.dates,
            links=options.links,
            verbose=options.verbose,
            human=options.human,
            all=options.all,
        )
