"""Reading of .reanim animation files into tracks of frames."""

from __future__ import annotations

import math
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Iterable

from pvzgame import logger

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_XML_DECLARATION = re.compile(rb"^\s*<\?xml[^>]*\?>")

_NUMERIC_FIELDS = {
    "x": "x",
    "y": "y",
    "sx": "sx",
    "sy": "sy",
    "kx": "kx",
    "ky": "ky",
    "a": "opacity",
}


class AnimationError(Exception):
    """Raised when an animation cannot be read or assembled."""


@dataclass
class AnimationFrame:
    """The state of one track at one frame."""

    frame_index: int = 0
    x: float = 0.0
    y: float = 0.0
    sx: float = 1.0
    sy: float = 1.0
    kx: float = 0.0
    ky: float = 0.0
    opacity: float = 1.0
    shown: bool = True
    image: str = ""


@dataclass
class AnimationTrack:
    """A named sequence of frames."""

    name: str = ""
    frames: list[AnimationFrame] = field(default_factory=list)

    @property
    def frame_count(self) -> int:
        return len(self.frames)


class Animation:
    """An animation made of tracks that all share one frame count."""

    def __init__(self, fps: int, name: str) -> None:
        self.fps = fps
        self.name = name
        self.tracks: list[AnimationTrack] = []
        self.frame_count = 0
        self.duration = 0.0
        self.current_frame = 0
        self.shown = False

    def __repr__(self) -> str:
        return (
            f"Animation(name={self.name!r}, fps={self.fps}, "
            f"tracks={len(self.tracks)}, frame_count={self.frame_count})"
        )

    def load_tracks(self, tracks: Iterable[AnimationTrack]) -> None:
        """Attach tracks; they may be loaded only once and must agree in length."""
        tracks = list(tracks)
        if self.tracks:
            raise AnimationError("Tracks have already been loaded for this animation.")
        if not tracks:
            raise AnimationError("No tracks provided to load.")

        frame_count = tracks[0].frame_count
        for number, track in enumerate(tracks):
            if track.frame_count != frame_count:
                raise AnimationError("All tracks must have the same number of frames.")
            logger.debug("Loading track #%d: '%s'", number, track.name)

        self.tracks = tracks
        self.frame_count = frame_count
        if self.fps:
            self.duration = frame_count / self.fps
        else:
            self.duration = math.inf if frame_count else math.nan

    def required_resources(self) -> list[str]:
        """Image names referenced by every frame of every track, in order."""
        if not self.tracks:
            raise AnimationError("No tracks loaded, cannot get required resources.")
        return [frame.image for track in self.tracks for frame in track.frames if frame.image]


def _text(element: ET.Element) -> str:
    return element.text or ""


def _int_text(element: ET.Element, default: int = 0) -> int:
    match = _INT_PREFIX.match(_text(element))
    return int(match.group(1)) if match else default


def _float_text(element: ET.Element, default: float = 0.0) -> float:
    match = _FLOAT_PREFIX.match(_text(element))
    return float(match.group(1)) if match else default


def parse_track_frame(element: ET.Element, frame: AnimationFrame) -> AnimationFrame:
    """Return a frame built from ``frame`` with the fields ``element`` sets.

    A frame element without children repeats the previous frame unchanged.
    """
    children = list(element)
    if not children:
        logger.debug("Empty frame found, duplicating last frame")
        return replace(frame)

    changes: dict[str, object] = {}
    for child in children:
        tag = child.tag
        if tag == "f":
            changes["shown"] = _int_text(child) != -1
        elif tag in _NUMERIC_FIELDS:
            changes[_NUMERIC_FIELDS[tag]] = _float_text(child)
        elif tag == "i":
            changes["image"] = _text(child)
        else:
            logger.error("Unknown element in frame: %s", tag)
    return replace(frame, **changes)


def parse_track(element: ET.Element) -> AnimationTrack:
    """Read a <track> element; each <t> inherits what the previous one set."""
    name_element = element.find("name")
    if name_element is None:
        raise AnimationError("Track has no <name> element")
    track = AnimationTrack(name=_text(name_element))
    logger.debug("Parsing track: %s", track.name)

    frame_elements = element.findall("t")
    if not frame_elements:
        raise AnimationError(f"No <t> elements found in track: {track.name}")

    current = AnimationFrame()
    for index, frame_element in enumerate(frame_elements):
        current = parse_track_frame(frame_element, current)
        current = replace(current, frame_index=index)
        track.frames.append(current)
    logger.debug("Finished parsing frames, total frames: %d", track.frame_count)
    return track


def parse_animation(text: str | bytes, name: str) -> Animation:
    """Build an animation from reanim markup.

    The fps comes from the first <fps> element and the track from the first
    <track> element that follows it.
    """
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    data = _XML_DECLARATION.sub(b"", data, count=1)
    try:
        root = ET.fromstring(b"<reanim>" + data + b"</reanim>")
    except ET.ParseError as exc:
        raise AnimationError(f"Failed to parse animation '{name}': {exc}") from exc

    children = list(root)
    fps_element = root.find("fps")
    if fps_element is None:
        raise AnimationError(f"No <fps> element found in animation: {name}")
    match = _INT_PREFIX.match(_text(fps_element))
    if match is None:
        raise AnimationError(f"Invalid <fps> value in animation: {name}")
    fps = int(match.group(1))
    logger.debug("FPS: %d", fps)

    position = children.index(fps_element)
    track_element = next((c for c in children[position + 1:] if c.tag == "track"), None)
    tracks = [parse_track(track_element)] if track_element is not None else []

    animation = Animation(fps, name)
    animation.load_tracks(tracks)
    return animation


def read_animation(path: str | Path) -> Animation:
    """Read a reanim file; the animation is named after the file's stem."""
    path = Path(path)
    if not path.exists():
        raise AnimationError(f"Animation file does not exist: {path}")
    logger.debug("Loading animation: %s", path.stem)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise AnimationError(f"Failed to load animation file: {path}: {exc}") from exc
    return parse_animation(data, path.stem)


def describe_frame(frame: AnimationFrame) -> str:
    """A readable multi-line summary of a frame."""
    return "\n".join(
        [
            f"Frame Index: {frame.frame_index}",
            f"Position: ({frame.x:f}, {frame.y:f})",
            f"Scale: ({frame.sx:f}, {frame.sy:f})",
            f"Rotation: ({frame.kx:f}, {frame.ky:f})",
            f"Opacity: {frame.opacity:f}",
            f"Shown: {'true' if frame.shown else 'false'}",
            f"Image: {frame.image}",
        ]
    )