"""Locations of wallets and other data files, per network."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from feeless.header import Network

APP_DIR = "feeless"
DATA_DIR_ENV = "FEELESS_DATA_DIR"

PathLike = Union[str, "os.PathLike[str]"]


def _data_local_dir() -> Path:
    if sys.platform.startswith("win"):
        local = os.environ.get("LOCALAPPDATA")
        if local:
            return Path(local)
        return Path.home() / "AppData" / "Local"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    xdg = os.environ.get("XDG_DATA_HOME")
    if xdg and Path(xdg).is_absolute():
        return Path(xdg)
    return Path.home() / ".local" / "share"


def _network_dir(network: Network) -> str:
    return network.name.lower()


@dataclass(frozen=True)
class Paths:
    """Base data directory laid out as ``{base}/{network}/{file}``."""

    data: Path

    @classmethod
    def default(cls, network: Network) -> "Paths":
        """The platform's local data directory under ``feeless``."""
        return cls(_data_local_dir() / APP_DIR / _network_dir(network))

    @classmethod
    def custom(cls, network: Network, data: PathLike) -> "Paths":
        return cls(Path(data) / _network_dir(network))

    @classmethod
    def maybe_custom(cls, network: Network, data: Optional[PathLike]) -> "Paths":
        if data is None:
            return cls.default(network)
        return cls.custom(network, data)

    def data_path(self, path: PathLike) -> Path:
        return self.data / path

    def wallet_path(self) -> Path:
        return self.data_path("wallet")

    def ensure_data_path(self) -> None:
        self.data.mkdir(parents=True, exist_ok=True)


def wallet_path(
    network: Network = Network.LIVE, data_dir: Optional[PathLike] = None
) -> Path:
    """Wallet location, creating its directory; honours FEELESS_DATA_DIR."""
    if data_dir is None:
        data_dir = os.environ.get(DATA_DIR_ENV) or None
    paths = Paths.maybe_custom(network, data_dir)
    paths.ensure_data_path()
    return paths.wallet_path()