"""
ShapeAssetRegistry  –  turns a shape name into a complete ShapeBundle.

Every shape needs three files, found through a resource store by a key
derived from its name:

    filled image   →  {name}
    outline image  →  empty_{name}
    audio cue      →  {name}

With the default DirectoryStore layout that is, for a triangle:

    triangle.png   empty_triangle.png   triangle.mp3

(A locale suffix such as ``triangle_en.mp3`` would slot in through a custom
layout; nothing here depends on it.)

Loading is all-or-nothing: either all three resources decode and a bundle is
returned, or a LoadError says which one was missing or broken.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Generic, Iterable, List, Protocol, Tuple, TypeVar

import pygame

logger = logging.getLogger(__name__)

T = TypeVar("T")


# ─────────────────────────── resource kinds ───────────────────────────
class ResourceKind(enum.Enum):
    FILLED_IMAGE  = "filled image"
    OUTLINE_IMAGE = "outline image"
    AUDIO         = "audio"


def resource_key(kind: ResourceKind, name: str) -> str:
    if kind is ResourceKind.OUTLINE_IMAGE:
        return f"empty_{name}"
    return name


# kind → (sub-directory, file extension)
DEFAULT_LAYOUT: Dict[ResourceKind, Tuple[str, str]] = {
    ResourceKind.FILLED_IMAGE:  ("", ".png"),
    ResourceKind.OUTLINE_IMAGE: ("", ".png"),
    ResourceKind.AUDIO:         ("", ".mp3"),
}


class ResourceStore(Protocol):
    def path_for(self, kind: ResourceKind, key: str) -> Path: ...
    def locate(self, kind: ResourceKind, key: str) -> Path | None: ...


class DirectoryStore:
    """Resource store backed by a folder on disk."""

    def __init__(self, root: Path, layout: Dict[ResourceKind, Tuple[str, str]] | None = None):
        self.root   = Path(root)
        self.layout = dict(DEFAULT_LAYOUT if layout is None else layout)

    def path_for(self, kind: ResourceKind, key: str) -> Path:
        subdir, ext = self.layout[kind]
        return self.root / subdir / f"{key}{ext}"

    def locate(self, kind: ResourceKind, key: str) -> Path | None:
        path = self.path_for(kind, key)
        return path if path.is_file() else None


# ─────────────────────────────── errors ───────────────────────────────
class LoadError(Exception):
    """A shape could not be loaded; carries the shape name and the path tried."""

    kind: ResourceKind | None = None
    label = "Could not load"

    def __init__(self, name: str, path: Path | str):
        self.name = name
        self.path = Path(path)
        super().__init__(f"{self.label} for '{name}': {self.path}")


class MissingFilledImage(LoadError):
    kind  = ResourceKind.FILLED_IMAGE
    label = "Missing filled image"


class MissingOutlineImage(LoadError):
    kind  = ResourceKind.OUTLINE_IMAGE
    label = "Missing outline image"


class MissingAudio(LoadError):
    kind  = ResourceKind.AUDIO
    label = "Missing audio"


class DecodeFailure(LoadError):
    label = "Failed to decode"

    def __init__(self, name: str, path: Path | str, kind: ResourceKind, reason: str):
        self.kind   = kind
        self.reason = reason
        super().__init__(name, path)
        self.args = (f"Failed to decode {kind.value} for '{name}': {self.path} ({reason})",)


MISSING_ERRORS = {
    ResourceKind.FILLED_IMAGE:  MissingFilledImage,
    ResourceKind.OUTLINE_IMAGE: MissingOutlineImage,
    ResourceKind.AUDIO:         MissingAudio,
}


@dataclass(frozen=True)
class LoadResult(Generic[T]):
    """Either a loaded value or the LoadError explaining why there is none."""

    value: T | None = None
    error: LoadError | None = None

    @classmethod
    def success(cls, value: T) -> "LoadResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: LoadError) -> "LoadResult[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


# ─────────────────────────────── bundle ───────────────────────────────
@dataclass(frozen=True)
class ShapeBundle:
    name:          str
    filled_image:  Any          # drop target
    outline_image: Any          # drag source
    audio:         Any          # spoken name


# ───────────────────────────── decoders ───────────────────────────────
def load_image(path: Path) -> pygame.Surface:
    surf = pygame.image.load(str(path))
    # convert_alpha needs a display mode; headless loads keep the raw surface
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        surf = surf.convert_alpha()
    return surf


def load_sound(path: Path) -> pygame.mixer.Sound:
    return pygame.mixer.Sound(str(path))


DECODE_ERRORS = (pygame.error, OSError, ValueError)


# ────────────────────────────── registry ──────────────────────────────
class ShapeAssetRegistry:
    def __init__(
        self,
        store: ResourceStore,
        image_loader: Callable[[Path], Any] | None = None,
        sound_loader: Callable[[Path], Any] | None = None,
    ):
        self.store = store
        self._decoders: Dict[ResourceKind, Callable[[Path], Any]] = {
            ResourceKind.FILLED_IMAGE:  image_loader or load_image,
            ResourceKind.OUTLINE_IMAGE: image_loader or load_image,
            ResourceKind.AUDIO:         sound_loader or load_sound,
        }

    # ----------------------------------------------------------------
    def load_shape(self, name: str) -> LoadResult[ShapeBundle]:
        """
        Locate and decode the three resources for *name*.
        Nothing is decoded until all three are known to exist.
        """
        if not isinstance(name, str) or not name:
            raise ValueError("shape name must be a non-empty string")

        paths: Dict[ResourceKind, Path] = {}
        for kind in ResourceKind:
            key  = resource_key(kind, name)
            path = self.store.locate(kind, key)
            if path is None:
                return LoadResult.failure(
                    MISSING_ERRORS[kind](name, self.store.path_for(kind, key))
                )
            paths[kind] = path

        loaded: Dict[ResourceKind, Any] = {}
        for kind, path in paths.items():
            try:
                loaded[kind] = self._decoders[kind](path)
            except DECODE_ERRORS as exc:
                return LoadResult.failure(DecodeFailure(name, path, kind, str(exc)))

        logger.debug("Loaded shape %r from %s", name, paths[ResourceKind.FILLED_IMAGE].parent)
        return LoadResult.success(ShapeBundle(
            name=name,
            filled_image=loaded[ResourceKind.FILLED_IMAGE],
            outline_image=loaded[ResourceKind.OUTLINE_IMAGE],
            audio=loaded[ResourceKind.AUDIO],
        ))

    def load_all(self, names: Iterable[str]) -> LoadResult[List[ShapeBundle]]:
        """Load every shape in order; the first failure wins and no list is returned."""
        names = list(names)
        if not names:
            raise ValueError("at least one shape name is required")

        bundles: List[ShapeBundle] = []
        for name in names:
            result = self.load_shape(name)
            if not result.ok:
                return LoadResult.failure(result.error)  # type: ignore[arg-type]
            bundles.append(result.value)  # type: ignore[arg-type]
        logger.info("Loaded %d shapes", len(bundles))
        return LoadResult.success(bundles)
