"""Map X keysyms to Qt key codes, as a platform input context does."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["QtKey", "lookup_keysym", "keysym_to_qt_key"]


class QtKey(IntEnum):
    """Qt key codes that keysyms can be mapped to."""

    Space = 0x20
    Plus = 0x2B
    Comma = 0x2C
    Minus = 0x2D
    Period = 0x2E
    Slash = 0x2F
    Digit0 = 0x30
    Digit1 = 0x31
    Digit2 = 0x32
    Digit3 = 0x33
    Digit4 = 0x34
    Digit5 = 0x35
    Digit6 = 0x36
    Digit7 = 0x37
    Digit8 = 0x38
    Digit9 = 0x39
    Equal = 0x3D
    multiply = 0xD7

    Escape = 0x01000000
    Tab = 0x01000001
    Backtab = 0x01000002
    Backspace = 0x01000003
    Return = 0x01000004
    Enter = 0x01000005
    Insert = 0x01000006
    Delete = 0x01000007
    Pause = 0x01000008
    Print = 0x01000009
    SysReq = 0x0100000A
    Clear = 0x0100000B
    Home = 0x01000010
    End = 0x01000011
    Left = 0x01000012
    Up = 0x01000013
    Right = 0x01000014
    Down = 0x01000015
    PageUp = 0x01000016
    PageDown = 0x01000017
    Shift = 0x01000020
    Control = 0x01000021
    Meta = 0x01000022
    Alt = 0x01000023
    CapsLock = 0x01000024
    NumLock = 0x01000025
    ScrollLock = 0x01000026
    F1 = 0x01000030
    F2 = 0x01000031
    F3 = 0x01000032
    F4 = 0x01000033
    F5 = 0x01000034
    F6 = 0x01000035
    F7 = 0x01000036
    F8 = 0x01000037
    F9 = 0x01000038
    F10 = 0x01000039
    F11 = 0x0100003A
    F12 = 0x0100003B
    F13 = 0x0100003C
    F14 = 0x0100003D
    F15 = 0x0100003E
    F16 = 0x0100003F
    F17 = 0x01000040
    F18 = 0x01000041
    F19 = 0x01000042
    F20 = 0x01000043
    F21 = 0x01000044
    F22 = 0x01000045
    F23 = 0x01000046
    F24 = 0x01000047
    F25 = 0x01000048
    F26 = 0x01000049
    F27 = 0x0100004A
    F28 = 0x0100004B
    F29 = 0x0100004C
    F30 = 0x0100004D
    F31 = 0x0100004E
    F32 = 0x0100004F
    F33 = 0x01000050
    F34 = 0x01000051
    F35 = 0x01000052
    Super_L = 0x01000053
    Super_R = 0x01000054
    Menu = 0x01000055
    Hyper_L = 0x01000056
    Hyper_R = 0x01000057
    Help = 0x01000058

    Back = 0x01000061
    Forward = 0x01000062
    Stop = 0x01000063
    Refresh = 0x01000064
    VolumeDown = 0x01000070
    VolumeMute = 0x01000071
    VolumeUp = 0x01000072
    MediaPlay = 0x01000080
    MediaStop = 0x01000081
    MediaPrevious = 0x01000082
    MediaNext = 0x01000083
    MediaRecord = 0x01000084
    MediaPause = 0x01000085
    HomePage = 0x01000090
    Favorites = 0x01000091
    Search = 0x01000092
    Standby = 0x01000093
    OpenUrl = 0x01000094
    LaunchMail = 0x010000A0
    LaunchMedia = 0x010000A1
    Launch0 = 0x010000A2
    Launch1 = 0x010000A3
    Launch2 = 0x010000A4
    Launch3 = 0x010000A5
    Launch4 = 0x010000A6
    Launch5 = 0x010000A7
    Launch6 = 0x010000A8
    Launch7 = 0x010000A9
    Launch8 = 0x010000AA
    Launch9 = 0x010000AB
    LaunchA = 0x010000AC
    LaunchB = 0x010000AD
    LaunchC = 0x010000AE
    LaunchD = 0x010000AF
    LaunchE = 0x010000B0
    LaunchF = 0x010000B1
    MonBrightnessUp = 0x010000B2
    MonBrightnessDown = 0x010000B3
    KeyboardLightOnOff = 0x010000B4
    KeyboardBrightnessUp = 0x010000B5
    KeyboardBrightnessDown = 0x010000B6
    PowerOff = 0x010000B7
    WakeUp = 0x010000B8
    Eject = 0x010000B9
    ScreenSaver = 0x010000BA
    WWW = 0x010000BB
    Memo = 0x010000BC
    LightBulb = 0x010000BD
    Shop = 0x010000BE
    History = 0x010000BF
    AddFavorite = 0x010000C0
    HotLinks = 0x010000C1
    BrightnessAdjust = 0x010000C2
    Finance = 0x010000C3
    Community = 0x010000C4
    AudioRewind = 0x010000C5
    BackForward = 0x010000C6
    ApplicationLeft = 0x010000C7
    ApplicationRight = 0x010000C8
    Book = 0x010000C9
    CD = 0x010000CA
    Calculator = 0x010000CB
    ToDoList = 0x010000CC
    ClearGrab = 0x010000CD
    Close = 0x010000CE
    Copy = 0x010000CF
    Cut = 0x010000D0
    Display = 0x010000D1
    DOS = 0x010000D2
    Documents = 0x010000D3
    Excel = 0x010000D4
    Explorer = 0x010000D5
    Game = 0x010000D6
    Go = 0x010000D7
    iTouch = 0x010000D8
    LogOff = 0x010000D9
    Market = 0x010000DA
    Meeting = 0x010000DB
    MenuKB = 0x010000DC
    MenuPB = 0x010000DD
    MySites = 0x010000DE
    News = 0x010000DF
    OfficeHome = 0x010000E0
    Option = 0x010000E1
    Paste = 0x010000E2
    Phone = 0x010000E3
    Calendar = 0x010000E4
    Reply = 0x010000E5
    Reload = 0x010000E6
    RotateWindows = 0x010000E7
    RotationPB = 0x010000E8
    RotationKB = 0x010000E9
    Save = 0x010000EA
    Send = 0x010000EB
    Spell = 0x010000EC
    SplitScreen = 0x010000ED
    Support = 0x010000EE
    TaskPane = 0x010000EF
    Terminal = 0x010000F0
    Tools = 0x010000F1
    Travel = 0x010000F2
    Video = 0x010000F3
    Word = 0x010000F4
    Xfer = 0x010000F5
    ZoomIn = 0x010000F6
    ZoomOut = 0x010000F7
    Away = 0x010000F8
    Messenger = 0x010000F9
    WebCam = 0x010000FA
    MailForward = 0x010000FB
    Pictures = 0x010000FC
    Music = 0x010000FD
    Battery = 0x010000FE
    Bluetooth = 0x010000FF
    WLAN = 0x01000100
    UWB = 0x01000101
    AudioForward = 0x01000102
    AudioRepeat = 0x01000103
    AudioRandomPlay = 0x01000104
    Subtitle = 0x01000105
    AudioCycleTrack = 0x01000106
    Time = 0x01000107
    Hibernate = 0x01000108
    View = 0x01000109
    TopMenu = 0x0100010A
    PowerDown = 0x0100010B
    Suspend = 0x0100010C
    ContrastAdjust = 0x0100010D
    LaunchG = 0x0100010E
    LaunchH = 0x0100010F

    AltGr = 0x01001103
    Multi_key = 0x01001120
    Kanji = 0x01001121
    Muhenkan = 0x01001122
    Henkan = 0x01001123
    Romaji = 0x01001124
    Hiragana = 0x01001125
    Katakana = 0x01001126
    Hiragana_Katakana = 0x01001127
    Zenkaku = 0x01001128
    Hankaku = 0x01001129
    Zenkaku_Hankaku = 0x0100112A
    Touroku = 0x0100112B
    Massyo = 0x0100112C
    Kana_Lock = 0x0100112D
    Kana_Shift = 0x0100112E
    Eisu_Shift = 0x0100112F
    Eisu_toggle = 0x01001130
    Hangul = 0x01001131
    Hangul_Start = 0x01001132
    Hangul_End = 0x01001133
    Hangul_Hanja = 0x01001134
    Hangul_Jamo = 0x01001135
    Hangul_Romaja = 0x01001136
    Codeinput = 0x01001137
    Hangul_Jeonja = 0x01001138
    Hangul_Banja = 0x01001139
    Hangul_PreHanja = 0x0100113A
    Hangul_PostHanja = 0x0100113B
    SingleCandidate = 0x0100113C
    MultipleCandidate = 0x0100113D
    PreviousCandidate = 0x0100113E
    Hangul_Special = 0x0100113F
    Mode_switch = 0x0100117E

    Dead_Grave = 0x01001250
    Dead_Acute = 0x01001251
    Dead_Circumflex = 0x01001252
    Dead_Tilde = 0x01001253
    Dead_Macron = 0x01001254
    Dead_Breve = 0x01001255
    Dead_Abovedot = 0x01001256
    Dead_Diaeresis = 0x01001257
    Dead_Abovering = 0x01001258
    Dead_Doubleacute = 0x01001259
    Dead_Caron = 0x0100125A
    Dead_Cedilla = 0x0100125B
    Dead_Ogonek = 0x0100125C
    Dead_Iota = 0x0100125D
    Dead_Voiced_Sound = 0x0100125E
    Dead_Semivoiced_Sound = 0x0100125F
    Dead_Belowdot = 0x01001260
    Dead_Hook = 0x01001261
    Dead_Horn = 0x01001262

    Select = 0x01010000
    Cancel = 0x01020001
    Execute = 0x01020003
    Sleep = 0x01020004


_K = QtKey

# Keysym values below follow the X keysym definitions.
_KEYSYM_TO_QT: dict[int, QtKey] = {
    # keypad
    0xFF80: _K.Space,  # KP_Space
    0xFF89: _K.Tab,  # KP_Tab
    0xFF8D: _K.Enter,  # KP_Enter
    0xFF91: _K.F1,  # KP_F1
    0xFF92: _K.F2,
    0xFF93: _K.F3,
    0xFF94: _K.F4,
    0xFF95: _K.Home,  # KP_Home
    0xFF96: _K.Left,
    0xFF97: _K.Up,
    0xFF98: _K.Right,
    0xFF99: _K.Down,
    0xFF9A: _K.PageUp,
    0xFF9B: _K.PageDown,
    0xFF9C: _K.End,
    0xFF9D: _K.Clear,  # KP_Begin
    0xFF9E: _K.Insert,
    0xFF9F: _K.Delete,
    0xFFBD: _K.Equal,
    0xFFAA: _K.multiply,
    0xFFAB: _K.Plus,
    0xFFAC: _K.Comma,  # KP_Separator
    0xFFAD: _K.Minus,
    0xFFAE: _K.Period,  # KP_Decimal
    0xFFAF: _K.Slash,
    # misc
    0xFF1B: _K.Escape,
    0xFF09: _K.Tab,
    0xFE20: _K.Backtab,  # ISO_Left_Tab
    0xFF08: _K.Backspace,
    0xFF0D: _K.Return,
    0xFF63: _K.Insert,
    0xFFFF: _K.Delete,
    0xFF0B: _K.Delete,  # Clear
    0xFF13: _K.Pause,
    0xFF61: _K.Print,
    0xFF15: _K.SysReq,
    0x1005FF60: _K.SysReq,  # Sun SysReq
    0x1007FF00: _K.SysReq,  # X386 SysReq
    # cursor movement
    0xFF50: _K.Home,
    0xFF57: _K.End,
    0xFF51: _K.Left,
    0xFF52: _K.Up,
    0xFF53: _K.Right,
    0xFF54: _K.Down,
    0xFF55: _K.PageUp,
    0xFF56: _K.PageDown,
    # modifiers
    0xFFE1: _K.Shift,
    0xFFE2: _K.Shift,
    0xFFE6: _K.Shift,  # Shift_Lock
    0xFFE3: _K.Control,
    0xFFE4: _K.Control,
    0xFFE7: _K.Meta,
    0xFFE8: _K.Meta,
    0xFFE9: _K.Alt,
    0xFFEA: _K.Alt,
    0xFFE5: _K.CapsLock,
    0xFF7F: _K.NumLock,
    0xFF14: _K.ScrollLock,
    0xFFEB: _K.Super_L,
    0xFFEC: _K.Super_R,
    0xFF67: _K.Menu,
    0xFFED: _K.Hyper_L,
    0xFFEE: _K.Hyper_R,
    0xFF6A: _K.Help,
    # input method keys
    0xFE03: _K.AltGr,  # ISO_Level3_Shift
    0xFF20: _K.Multi_key,
    0xFF37: _K.Codeinput,  # also Kanji_Bangou, Hangul_Codeinput
    0xFF3C: _K.SingleCandidate,  # also Hangul_SingleCandidate
    0xFF3D: _K.MultipleCandidate,  # also Zen_Koho
    0xFF3E: _K.PreviousCandidate,  # also Mae_Koho
    0xFF7E: _K.Mode_switch,  # also script_switch, Hangul_switch
    0xFF21: _K.Kanji,
    0xFF22: _K.Muhenkan,
    0xFF23: _K.Henkan,
    0xFF24: _K.Romaji,
    0xFF25: _K.Hiragana,
    0xFF26: _K.Katakana,
    0xFF27: _K.Hiragana_Katakana,
    0xFF28: _K.Zenkaku,
    0xFF29: _K.Hankaku,
    0xFF2A: _K.Zenkaku_Hankaku,
    0xFF2B: _K.Touroku,
    0xFF2C: _K.Massyo,
    0xFF2D: _K.Kana_Lock,
    0xFF2E: _K.Kana_Shift,
    0xFF2F: _K.Eisu_Shift,
    0xFF30: _K.Eisu_toggle,
    0xFF31: _K.Hangul,
    0xFF32: _K.Hangul_Start,
    0xFF33: _K.Hangul_End,
    0xFF34: _K.Hangul_Hanja,
    0xFF35: _K.Hangul_Jamo,
    0xFF36: _K.Hangul_Romaja,
    0xFF38: _K.Hangul_Jeonja,
    0xFF39: _K.Hangul_Banja,
    0xFF3A: _K.Hangul_PreHanja,
    0xFF3B: _K.Hangul_PostHanja,
    0xFF3F: _K.Hangul_Special,
    # dead keys
    0xFE50: _K.Dead_Grave,
    0xFE51: _K.Dead_Acute,
    0xFE52: _K.Dead_Circumflex,
    0xFE53: _K.Dead_Tilde,
    0xFE54: _K.Dead_Macron,
    0xFE55: _K.Dead_Breve,
    0xFE56: _K.Dead_Abovedot,
    0xFE57: _K.Dead_Diaeresis,
    0xFE58: _K.Dead_Abovering,
    0xFE59: _K.Dead_Doubleacute,
    0xFE5A: _K.Dead_Caron,
    0xFE5B: _K.Dead_Cedilla,
    0xFE5C: _K.Dead_Ogonek,
    0xFE5D: _K.Dead_Iota,
    0xFE5E: _K.Dead_Voiced_Sound,
    0xFE5F: _K.Dead_Semivoiced_Sound,
    0xFE60: _K.Dead_Belowdot,
    0xFE61: _K.Dead_Hook,
    0xFE62: _K.Dead_Horn,
    # XF86 multimedia and launcher keys
    0x1008FF26: _K.Back,
    0x1008FF27: _K.Forward,
    0x1008FF28: _K.Stop,
    0x1008FF29: _K.Refresh,
    0x1008FF11: _K.VolumeDown,
    0x1008FF12: _K.VolumeMute,
    0x1008FF13: _K.VolumeUp,
    0x1008FF14: _K.MediaPlay,
    0x1008FF15: _K.MediaStop,
    0x1008FF16: _K.MediaPrevious,
    0x1008FF17: _K.MediaNext,
    0x1008FF1C: _K.MediaRecord,
    0x1008FF31: _K.MediaPause,
    0x1008FF18: _K.HomePage,
    0x1008FF30: _K.Favorites,
    0x1008FF1B: _K.Search,
    0x1008FF10: _K.Standby,
    0x1008FF38: _K.OpenUrl,
    0x1008FF19: _K.LaunchMail,
    0x1008FF32: _K.LaunchMedia,
    0x1008FF33: _K.Launch0,  # MyComputer
    0x1008FF1D: _K.Launch1,  # Calculator
    0x1008FF40: _K.Launch2,
    0x1008FF41: _K.Launch3,
    0x1008FF42: _K.Launch4,
    0x1008FF43: _K.Launch5,
    0x1008FF44: _K.Launch6,
    0x1008FF45: _K.Launch7,
    0x1008FF46: _K.Launch8,
    0x1008FF47: _K.Launch9,
    0x1008FF48: _K.LaunchA,
    0x1008FF49: _K.LaunchB,
    0x1008FF4A: _K.LaunchC,
    0x1008FF4B: _K.LaunchD,
    0x1008FF4C: _K.LaunchE,
    0x1008FF4D: _K.LaunchF,
    0x1008FF02: _K.MonBrightnessUp,
    0x1008FF03: _K.MonBrightnessDown,
    0x1008FF04: _K.KeyboardLightOnOff,
    0x1008FF05: _K.KeyboardBrightnessUp,
    0x1008FF06: _K.KeyboardBrightnessDown,
    0x1008FF2A: _K.PowerOff,
    0x1008FF2B: _K.WakeUp,
    0x1008FF2C: _K.Eject,
    0x1008FF2D: _K.ScreenSaver,
    0x1008FF2E: _K.WWW,
    0x1008FF1E: _K.Memo,
    0x1008FF35: _K.LightBulb,
    0x1008FF36: _K.Shop,
    0x1008FF37: _K.History,
    0x1008FF39: _K.AddFavorite,
    0x1008FF3A: _K.HotLinks,
    0x1008FF3B: _K.BrightnessAdjust,
    0x1008FF3C: _K.Finance,
    0x1008FF3D: _K.Community,
    0x1008FF3E: _K.AudioRewind,
    0x1008FF3F: _K.BackForward,
    0x1008FF50: _K.ApplicationLeft,
    0x1008FF51: _K.ApplicationRight,
    0x1008FF52: _K.Book,
    0x1008FF53: _K.CD,
    0x1008FF54: _K.Calculator,  # Calculater
    0x1008FF1F: _K.ToDoList,
    0x1008FE21: _K.ClearGrab,
    0x1008FF56: _K.Close,
    0x1008FF57: _K.Copy,
    0x1008FF58: _K.Cut,
    0x1008FF59: _K.Display,
    0x1008FF5A: _K.DOS,
    0x1008FF5B: _K.Documents,
    0x1008FF5C: _K.Excel,
    0x1008FF5D: _K.Explorer,
    0x1008FF5E: _K.Game,
    0x1008FF5F: _K.Go,
    0x1008FF60: _K.iTouch,
    0x1008FF61: _K.LogOff,
    0x1008FF62: _K.Market,
    0x1008FF63: _K.Meeting,
    0x1008FF65: _K.MenuKB,
    0x1008FF66: _K.MenuPB,
    0x1008FF67: _K.MySites,
    0x1008FF69: _K.News,
    0x1008FF6A: _K.OfficeHome,
    0x1008FF6C: _K.Option,
    0x1008FF6D: _K.Paste,
    0x1008FF6E: _K.Phone,
    0x1008FF20: _K.Calendar,
    0x1008FF72: _K.Reply,
    0x1008FF73: _K.Reload,
    0x1008FF74: _K.RotateWindows,
    0x1008FF75: _K.RotationPB,
    0x1008FF76: _K.RotationKB,
    0x1008FF77: _K.Save,
    0x1008FF7B: _K.Send,
    0x1008FF7C: _K.Spell,
    0x1008FF7D: _K.SplitScreen,
    0x1008FF7E: _K.Support,
    0x1008FF7F: _K.TaskPane,
    0x1008FF80: _K.Terminal,
    0x1008FF81: _K.Tools,
    0x1008FF82: _K.Travel,
    0x1008FF87: _K.Video,
    0x1008FF89: _K.Word,
    0x1008FF8A: _K.Xfer,
    0x1008FF8B: _K.ZoomIn,
    0x1008FF8C: _K.ZoomOut,
    0x1008FF8D: _K.Away,
    0x1008FF8E: _K.Messenger,
    0x1008FF8F: _K.WebCam,
    0x1008FF90: _K.MailForward,
    0x1008FF91: _K.Pictures,
    0x1008FF92: _K.Music,
    0x1008FF93: _K.Battery,
    0x1008FF94: _K.Bluetooth,
    0x1008FF95: _K.WLAN,
    0x1008FF96: _K.UWB,
    0x1008FF97: _K.AudioForward,
    0x1008FF98: _K.AudioRepeat,
    0x1008FF99: _K.AudioRandomPlay,
    0x1008FF9A: _K.Subtitle,
    0x1008FF9B: _K.AudioCycleTrack,
    0x1008FF9F: _K.Time,
    0x1008FFA8: _K.Hibernate,
    0x1008FFA1: _K.View,
    0x1008FFA2: _K.TopMenu,
    0x1008FF21: _K.PowerDown,
    0x1008FFA7: _K.Suspend,
    0x1008FF22: _K.ContrastAdjust,
    0x1008FF4E: _K.LaunchG,
    0x1008FF4F: _K.LaunchH,
    0x1008FFA0: _K.Select,
    0xFF69: _K.Cancel,
    0xFF62: _K.Execute,
    0x1008FF2F: _K.Sleep,
}

# Keypad digits KP_0..KP_9 and function keys F1..F35 are contiguous.
_KEYSYM_TO_QT.update({0xFFB0 + n: QtKey[f"Digit{n}"] for n in range(10)})
_KEYSYM_TO_QT.update({0xFFBE + n: QtKey[f"F{n + 1}"] for n in range(35)})

_DEAD_FIRST = 0xFE50  # dead_grave
_DEAD_LAST = 0xFE6F  # dead_currency
_MAX_KEYSYM = 0xFFFFFFFF


def _check_keysym(keysym: int) -> None:
    if not 0 <= keysym <= _MAX_KEYSYM:
        raise ValueError(f"keysym out of range: {keysym!r}")


def lookup_keysym(keysym: int) -> int:
    """Return the Qt key for a keysym from the fixed table, or 0 if unknown."""
    _check_keysym(keysym)
    return _KEYSYM_TO_QT.get(keysym, 0)


def _utf16_length(text: str) -> int:
    return len(text.encode("utf-16-le")) // 2


def _simple_upper(char: str) -> int:
    upper = char.upper()
    if len(upper) == 1 and ord(upper) <= 0xFFFF:
        return ord(upper)
    return ord(char)


def keysym_to_qt_key(keysym: int, text: str = "") -> int:
    """Translate a keysym and the text it produced into a Qt key code.

    ASCII keysyms give their upper-case character, a single printable
    character of text gives its upper-case code point, and anything else
    is looked up in the key table. Returns 0 when nothing matches.
    """
    _check_keysym(keysym)
    if keysym < 128:
        return ord(chr(keysym).upper()) if 0x20 <= keysym < 0x7F else 0
    if _utf16_length(text) == 1:
        codepoint = ord(text)
        if (
            codepoint > 0x1F
            and codepoint != 0x7F
            and not _DEAD_FIRST <= keysym <= _DEAD_LAST
        ):
            return _simple_upper(text)
    return lookup_keysym(keysym)