"""Loading of scene configuration, mesh and light description files."""

from __future__ import annotations

import copy
import math
import os
from dataclasses import dataclass, field
from enum import Enum, auto

from .parser import _to_float, _to_int, extract_match, find_couple, find_triple

__all__ = [
    "LoaderError",
    "LoaderType",
    "ConfigData",
    "MeshData",
    "ControlPoint",
    "LightData",
    "Loader",
]

Vec3 = tuple[float, float, float]


class LoaderError(ValueError):
    """Raised when a description file is malformed or data is not loaded."""


class LoaderType(Enum):
    CONFIG = auto()
    MESH = auto()
    LIGHT = auto()
    DYNAMICS = auto()


@dataclass
class ConfigData:
    position: Vec3
    target: Vec3
    up: Vec3
    width: int
    height: int
    fullscreen: bool


@dataclass
class MeshData:
    filename: str
    entity_name: str
    position: Vec3
    pitch: Vec3
    scale: float


@dataclass
class ControlPoint:
    position: Vec3
    time: float


@dataclass
class LightData:
    color: Vec3
    ambient: float
    diffuse: float
    linear: float
    constant: float
    exp: float
    controltype: str = ""
    control_points: list[ControlPoint] = field(default_factory=list)


def _from_keyword(buf: str, keyword: str, error: str) -> str:
    index = buf.find(keyword)
    if index < 0:
        raise LoaderError(error)
    return buf[index:]


def _strip_comment(line: str) -> str:
    index = line.find("#")
    return line if index < 0 else line[:index]


class Loader:
    """Reads description files and keeps the last successfully read data."""

    def __init__(self) -> None:
        self._filename = ""
        self._loaded: set[LoaderType] = set()
        self._config: ConfigData | None = None
        self._meshes: list[MeshData] = []
        self._lights: list[LightData] = []

    def load(self, filename, kind: LoaderType) -> None:
        """Read ``filename`` as a file of the given kind."""
        self._filename = os.fspath(filename)
        handlers = {
            LoaderType.CONFIG: self._load_config,
            LoaderType.MESH: self._load_mesh,
            LoaderType.LIGHT: self._load_light,
            LoaderType.DYNAMICS: self._load_dynamics,
        }
        handlers[kind]()

    def config(self) -> ConfigData:
        if LoaderType.CONFIG not in self._loaded:
            raise LoaderError("error can't get data config before loading it")
        return copy.copy(self._config)

    def meshes(self) -> list[MeshData]:
        if LoaderType.MESH not in self._loaded:
            raise LoaderError("error can't get mesh config before loading it")
        return copy.deepcopy(self._meshes)

    def lights(self) -> list[LightData]:
        if LoaderType.LIGHT not in self._loaded:
            raise LoaderError("error can't get light config before loading it")
        return copy.deepcopy(self._lights)

    def _read_lines(self) -> list[str] | None:
        try:
            with open(self._filename, encoding="utf-8") as handle:
                return handle.read().split("\n")
        except OSError:
            return None

    def _load_config(self) -> None:
        self._loaded.discard(LoaderType.CONFIG)
        lines = self._read_lines()
        if lines is None:
            return
        error = "Error configuration file at first line"
        rows = iter(lines)

        buf = next(rows, "")
        if "camera position" not in buf:
            raise LoaderError(error)
        end, inner = extract_match(buf)
        position = find_triple(inner)
        buf = _from_keyword(buf[end + 1 :], "target", error)
        end, inner = extract_match(buf)
        target = find_triple(inner)
        buf = buf[end + 1 :]
        if "up" not in buf:
            raise LoaderError(error)
        up = find_triple(extract_match(buf)[1])

        buf = next(rows, "")
        if "resolution" not in buf:
            raise LoaderError(error)
        width, height = find_couple(extract_match(buf)[1])

        buf = next(rows, "")
        if "fullscreen" not in buf:
            raise LoaderError(error)
        fullscreen = _to_int(extract_match(buf)[1]) == 1

        self._config = ConfigData(position, target, up, width, height, fullscreen)
        self._loaded.add(LoaderType.CONFIG)

    def _load_mesh(self) -> None:
        self._loaded.discard(LoaderType.MESH)
        self._meshes.clear()
        lines = self._read_lines()
        if lines is None:
            return
        error = f"error during loading meshfile: {self._filename}"

        for line in lines:
            buf = _strip_comment(line)
            if not buf:
                continue
            index = buf.find(" ")
            if index <= 0:
                raise LoaderError(error)
            name, buf = buf[:index], buf[index + 1 :]
            index = buf.find(" ")
            if index <= 0:
                raise LoaderError(error)
            entity, buf = buf[:index], buf[index:]

            buf = _from_keyword(buf, "position", error)
            end, inner = extract_match(buf)
            position = find_triple(inner)
            buf = _from_keyword(buf[end + 1 :], "rotate", error)
            end, inner = extract_match(buf)
            pitch = tuple(math.radians(angle) for angle in find_triple(inner))
            buf = _from_keyword(buf[end + 1 :], "scale", error)
            scale = _to_float(extract_match(buf)[1])

            self._meshes.append(MeshData(name, entity, position, pitch, scale))
            self._loaded.add(LoaderType.MESH)

    def _load_light(self) -> None:
        self._loaded.discard(LoaderType.LIGHT)
        self._lights.clear()
        lines = self._read_lines()
        if lines is None:
            return
        error = f"error during loading lights file: {self._filename}"
        controltype = "unknow"

        for line in lines:
            buf = _strip_comment(line)
            if not buf:
                continue
            color_at = buf.find("color")
            position_at = buf.find("position")
            if color_at >= 0:
                controltype = "unknow"
                buf = buf[color_at:]
                end, inner = extract_match(buf)
                color = find_triple(inner)
                values = []
                for keyword in ("ambiant", "diffuse", "linear", "constant", "exp"):
                    buf = _from_keyword(buf[end + 1 :], keyword, error)
                    end, inner = extract_match(buf)
                    values.append(_to_float(inner))
                self._lights.append(LightData(color, *values))
            elif "controlpoint" in buf:
                controltype = "linear" if "linear" in buf else "unknow"
                if not self._lights:
                    raise LoaderError(error)
                self._lights[-1].controltype = controltype
            elif position_at >= 0 and controltype == "linear":
                buf = buf[position_at:]
                end, inner = extract_match(buf)
                position = find_triple(inner)
                buf = _from_keyword(buf[end + 1 :], "timemill", error)
                time = _to_float(extract_match(buf)[1])
                self._lights[-1].control_points.append(ControlPoint(position, time))

        self._loaded.add(LoaderType.LIGHT)

    def _load_dynamics(self) -> None:
        # Dynamics files are recognised but carry no data yet.
        self._read_lines()