"""Fixed table from keysyms to Qt key codes for keys that produce no text."""

from __future__ import annotations

from .qtkey import QtKey

__all__ = ["translate_keysym"]

_K = QtKey
_KEY_ASTERISK = 0x2A

# Hangul keys are not part of this table; they translate to no key.
_KEYSYM_TO_QT: dict[int, int] = {
    # misc keys
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
    0x1005FF60: _K.SysReq,  # Sun SysReq
    0x1007FF00: _K.SysReq,  # X386 SysReq
    # cursor movement
    0xFF50: _K.Home,
    0xFF57: _K.End,
    0xFF51: _K.Left,
    0xFF52: _K.Up,
    0xFF53: _K.Right,
    0xFF54: _K.Down,
    0xFF55: _K.PageUp,  # Prior
    0xFF56: _K.PageDown,  # Next
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
    0x1000FF74: _K.Backtab,  # HP backtab
    0x1005FF10: _K.F11,  # Sun F36
    0x1005FF11: _K.F12,  # Sun F37
    # keypad
    0xFF80: _K.Space,
    0xFF89: _K.Tab,
    0xFF8D: _K.Enter,
    0xFF95: _K.Home,
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
    0xFFAA: _KEY_ASTERISK,  # KP_Multiply
    0xFFAB: _K.Plus,
    0xFFAC: _K.Comma,
    0xFFAD: _K.Minus,
    0xFFAE: _K.Period,
    0xFFAF: _K.Slash,
    # international input method keys
    0xFE03: _K.AltGr,  # ISO_Level3_Shift
    0xFF20: _K.Multi_key,
    0xFF37: _K.Codeinput,  # also Kanji_Bangou
    0xFF3C: _K.SingleCandidate,
    0xFF3D: _K.MultipleCandidate,  # also Zen_Koho
    0xFF3E: _K.PreviousCandidate,  # also Mae_Koho
    0xFF7E: _K.Mode_switch,  # also script_switch
    # Japanese keyboard keys
    0xFF21: _K.Kanji,
    0xFF22: _K.Muhenkan,
    0xFF23: _K.Henkan,  # Henkan_Mode
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
    # XF86 multimedia, wireless and launcher keys
    0x1008FF26: _K.Back,
    0x1008FF27: _K.Forward,
    0x1008FF28: _K.Stop,
    0x1008FF29: _K.Refresh,
    0x1008FF30: _K.Favorites,
    0x1008FF32: _K.LaunchMedia,
    0x1008FF38: _K.OpenUrl,
    0x1008FF18: _K.HomePage,
    0x1008FF1B: _K.Search,
    0x1008FF11: _K.VolumeDown,
    0x1008FF12: _K.VolumeMute,
    0x1008FF13: _K.VolumeUp,
    0x1008FF14: _K.MediaPlay,
    0x1008FF15: _K.MediaStop,
    0x1008FF16: _K.MediaPrevious,
    0x1008FF17: _K.MediaNext,
    0x1008FF1C: _K.MediaRecord,
    0x1008FF19: _K.LaunchMail,
    0x1008FF33: _K.Launch0,  # MyComputer
    0x1008FF1D: _K.Launch1,  # Calculator
    0x1008FF1E: _K.Memo,
    0x1008FF1F: _K.ToDoList,
    0x1008FF20: _K.Calendar,
    0x1008FF21: _K.PowerDown,
    0x1008FF22: _K.ContrastAdjust,
    0x1008FF10: _K.Standby,
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
    0x1008FF2F: _K.Sleep,
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
    0x1008FF55: _K.Clear,
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
    0x1008FFA0: _K.Select,
    0x1008FFA1: _K.View,
    0x1008FFA2: _K.TopMenu,
    0x1008FFA7: _K.Suspend,
    0x1008FFA8: _K.Hibernate,
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
    0x1008FF4E: _K.LaunchG,
    0x1008FF4F: _K.LaunchH,
}


def translate_keysym(keysym: int) -> int:
    """Return the Qt key code for a non-text keysym, or -1 if it has none."""
    return int(_KEYSYM_TO_QT.get(keysym, -1))