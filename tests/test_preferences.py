from notepad.preferences import Preferences, SettingsKeys, clamp_font_size, get_bool


class DictStore:
    def __init__(self, data=None):
        self.data = dict(data or {})

    def value(self, key, defaultValue=None):
        return self.data.get(key, defaultValue)

    def setValue(self, key, value):
        self.data[key] = value


def test_defaults():
    prefs = Preferences(DictStore())
    assert prefs.use_custom_font is True
    assert prefs.font_size == 14
    assert prefs.last_note == ""


def test_custom_font_default_comes_from_caller():
    assert Preferences(DictStore(), custom_font_default=False).use_custom_font is False


def test_toggle_custom_font_persists():
    store = DictStore()
    prefs = Preferences(store)

    assert prefs.toggle_custom_font() is False
    assert store.data[SettingsKeys.USE_CUSTOM_FONT] is False
    assert prefs.toggle_custom_font() is True


def test_ini_style_bool_strings():
    store = DictStore({"k": "false"})
    assert get_bool(store, "k", True) is False
    store.data["k"] = "garbage"
    assert get_bool(store, "k", True) is True


def test_font_size_is_clamped():
    store = DictStore({SettingsKeys.FONT_SIZE: "99"})
    prefs = Preferences(store)
    assert prefs.font_size == 30

    prefs.font_size = 3
    assert store.data[SettingsKeys.FONT_SIZE] == 10
    assert clamp_font_size("x") == 14


def test_unreadable_font_size_falls_back():
    assert Preferences(DictStore({SettingsKeys.FONT_SIZE: "big"})).font_size == 14


def test_last_note_round_trip():
    prefs = Preferences(DictStore())
    prefs.last_note = "ideas.txt"
    assert prefs.last_note == "ideas.txt"
