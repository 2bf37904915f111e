"""
Default option tables for geoscape.

Defaults are kept as typed Python values; the registry converts them to their
canonical string form when it (re)builds the default option set. A small set
of display and input keys depends on the device the game runs on, so those
live in per-platform overrides layered over the shared table.
"""

from enum import IntEnum
from typing import Dict, List, Mapping, Union

from .types import ConfigError, Platform

DefaultValue = Union[bool, int, str]

# Mixer volume ceiling; volumes are stored in 0..MAX_VOLUME.
MAX_VOLUME = 128

DEFAULT_RULESETS: List[str] = ["Xcom1Ruleset"]

DEFAULT_PROFILE_NAME = "options"


class KeyboardMode(IntEnum):
    OFF = 0
    ON = 1
    VIRTUAL = 2


class ScrollType(IntEnum):
    TRIGGER = 0
    AUTO = 1


class MouseButton(IntEnum):
    LEFT = 1
    MIDDLE = 2
    RIGHT = 3


class Key(IntEnum):
    """Key codes as stored in the settings file (SDL 1.2 keysyms)."""
    BACKSPACE = 8
    TAB = 9
    RETURN = 13
    ESCAPE = 27
    PLUS = 43
    MINUS = 45
    K1 = 49
    K2 = 50
    K3 = 51
    K4 = 52
    K5 = 53
    K6 = 54
    K7 = 55
    K8 = 56
    K9 = 57
    BACKSLASH = 92
    A = 97
    B = 98
    F = 102
    G = 103
    I = 105  # noqa: E741
    K = 107
    L = 108
    M = 109
    R = 114
    U = 117
    UP = 273
    DOWN = 274
    RIGHT = 275
    LEFT = 276
    HOME = 278
    PAGEUP = 280
    PAGEDOWN = 281
    F1 = 282
    F2 = 283
    F3 = 284
    F4 = 285
    F5 = 286
    F12 = 293
    LSHIFT = 304


BASE_DEFAULTS: Dict[str, DefaultValue] = {
    # video
    "traceAI": False,
    "sneakyAI": False,
    "baseXResolution": 320,
    "baseYResolution": 200,
    "useScaleFilter": False,
    "useHQXFilter": False,
    "useOpenGL": False,
    "checkOpenGLErrors": False,
    "useOpenGLShader": "Shaders/CRT-interlaced.OpenGL.shader",
    "vSyncForOpenGL": False,
    "useOpenGLSmoothing": True,
    "debug": False,
    "debugUi": False,
    # audio
    "mute": False,
    "soundVolume": MAX_VOLUME,
    "musicVolume": MAX_VOLUME,
    "audioSampleRate": 22050,
    "audioBitDepth": 16,
    "language": "",
    # battlescape
    "battleScrollSpeed": 24,  # 8, 16, 24, 32, 40
    "battleScrollType": int(ScrollType.AUTO),
    "battleScrollDragButton": int(MouseButton.MIDDLE),
    "battleScrollDragInvert": False,
    "battleScrollDragTimeTolerance": 300,  # ms
    "battleScrollDragPixelTolerance": 10,
    "battleFireSpeed": 20,  # 40, 30, 20, 10, 5, 1
    "battleXcomSpeed": 30,
    "battleAlienSpeed": 30,
    "battleInstantGrenade": False,
    "battleExplosionHeight": 3,  # 0..3
    "battlePreviewPath": False,
    "battleRangeBasedAccuracy": False,
    "battleNotifyDeath": False,
    "strafe": False,
    # geoscape
    "fpsCounter": False,
    "craftLaunchAlways": False,
    "globeSeasons": False,
    "globeAllRadarsOnBaseBuild": True,
    "allowChangeListValuesByMouseWheel": True,
    "changeValueByMouseWheel": 10,
    "pauseMode": 0,
    "alienContainmentHasUpperLimit": False,
    "canSellLiveAliens": False,
    "canTransferCraftsInAirborne": False,
    "canManufactureMoreItemsPerHour": False,
    "customInitialBase": False,
    "aggressiveRetaliation": False,
    "allowBuildingQueue": False,
    "allowAutoSellProduction": False,
    "showFundsOnGeoscape": False,
    "showMoreStatsInInventoryView": False,
    # window
    "allowResize": False,
    "windowedModePositionX": 3,
    "windowedModePositionY": 22,
    # controls
    "keyOk": int(Key.RETURN),
    "keyCancel": int(Key.ESCAPE),
    "keyScreenshot": int(Key.F12),
    "keyFps": int(Key.F5),
    "keyGeoLeft": int(Key.LEFT),
    "keyGeoRight": int(Key.RIGHT),
    "keyGeoUp": int(Key.UP),
    "keyGeoDown": int(Key.DOWN),
    "keyGeoZoomIn": int(Key.PLUS),
    "keyGeoZoomOut": int(Key.MINUS),
    "keyGeoSpeed1": int(Key.K1),
    "keyGeoSpeed2": int(Key.K2),
    "keyGeoSpeed3": int(Key.K3),
    "keyGeoSpeed4": int(Key.K4),
    "keyGeoSpeed5": int(Key.K5),
    "keyGeoSpeed6": int(Key.K6),
    "keyGeoIntercept": int(Key.I),
    "keyGeoBases": int(Key.B),
    "keyGeoGraphs": int(Key.G),
    "keyGeoUfopedia": int(Key.U),
    "keyGeoOptions": int(Key.ESCAPE),
    "keyGeoFunding": int(Key.F),
    "keyGeoToggleDetail": int(Key.TAB),
    "keyGeoToggleRadar": int(Key.R),
    "keyBattleLeft": int(Key.LEFT),
    "keyBattleRight": int(Key.RIGHT),
    "keyBattleUp": int(Key.UP),
    "keyBattleDown": int(Key.DOWN),
    "keyBattleLevelUp": int(Key.PAGEUP),
    "keyBattleLevelDown": int(Key.PAGEDOWN),
    "keyBattleCenterUnit": int(Key.HOME),
    "keyBattlePrevUnit": int(Key.LSHIFT),
    "keyBattleNextUnit": int(Key.TAB),
    "keyBattleDeselectUnit": int(Key.BACKSLASH),
    "keyBattleInventory": int(Key.I),
    "keyBattleMap": int(Key.M),
    "keyBattleOptions": int(Key.ESCAPE),
    "keyBattleEndTurn": int(Key.BACKSPACE),
    "keyBattleAbort": int(Key.A),
    "keyBattleStats": int(Key.F1),
    "keyBattleKneel": int(Key.K),
    "keyBattleReload": int(Key.R),
    "keyBattlePersonalLighting": int(Key.L),
    "keyBattleReserveNone": int(Key.F2),
    "keyBattleReserveSnap": int(Key.F3),
    "keyBattleReserveAimed": int(Key.F4),
    "keyBattleReserveAuto": int(Key.F5),
    "keyBattleCenterEnemy1": int(Key.K1),
    "keyBattleCenterEnemy2": int(Key.K2),
    "keyBattleCenterEnemy3": int(Key.K3),
    "keyBattleCenterEnemy4": int(Key.K4),
    "keyBattleCenterEnemy5": int(Key.K5),
    "keyBattleCenterEnemy6": int(Key.K6),
    "keyBattleCenterEnemy7": int(Key.K7),
    "keyBattleCenterEnemy8": int(Key.K8),
    "keyBattleCenterEnemy9": int(Key.K9),
}

PLATFORM_DEFAULTS: Dict[Platform, Dict[str, DefaultValue]] = {
    Platform.DESKTOP: {
        "displayWidth": 640,
        "displayHeight": 400,
        "fullscreen": False,
        "asyncBlit": True,
        "keyboardMode": int(KeyboardMode.ON),
    },
    Platform.HANDHELD: {
        "displayWidth": 320,
        "displayHeight": 200,
        "fullscreen": True,
        "asyncBlit": False,
        "keyboardMode": int(KeyboardMode.OFF),
    },
}


def resolve_platform(name: Union[str, Platform]) -> Platform:
    """Map a platform identifier to its profile.

    Raises:
        ConfigError: If the identifier names no known profile.
    """
    if isinstance(name, Platform):
        return name
    try:
        return Platform(name.strip().lower())
    except ValueError:
        known = ", ".join(p.value for p in Platform)
        raise ConfigError(f"Unknown platform profile '{name}'. Known: {known}")


def default_options(platform: Platform) -> Mapping[str, DefaultValue]:
    """Full default table for a platform: platform keys first, shared keys after."""
    table: Dict[str, DefaultValue] = dict(PLATFORM_DEFAULTS[platform])
    table.update(BASE_DEFAULTS)
    return table
