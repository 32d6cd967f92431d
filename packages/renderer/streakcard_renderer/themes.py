"""Built-in card themes."""

from __future__ import annotations

from .errors import ThemeRegistryError
from .models import ThemeColors

DEFAULT_THEME_NAME = "default"

THEMES: dict[str, ThemeColors] = {
    "default": ThemeColors(
        background="#FFFEFE",
        border="#E4E2E2",
        stroke="#E4E2E2",
        ring="#FB8C00",
        fire="#FB8C00",
        curr_streak_num="#151515",
        side_nums="#151515",
        curr_streak_label="#FB8C00",
        side_labels="#151515",
        dates="#464646",
        excluded_days_label="#464646",
    ),
    "dark": ThemeColors(
        background="#151515",
        border="#E4E2E2",
        stroke="#E4E2E2",
        ring="#FB8C00",
        fire="#FB8C00",
        curr_streak_num="#FEFEFE",
        side_nums="#FEFEFE",
        curr_streak_label="#FB8C00",
        side_labels="#FEFEFE",
        dates="#9E9E9E",
        excluded_days_label="#9E9E9E",
    ),
    "highcontrast": ThemeColors(
        background="#000000",
        border="#E4E2E2",
        stroke="#E4E2E2",
        ring="#FB8C00",
        fire="#FB8C00",
        curr_streak_num="#FFFFFF",
        side_nums="#FFFFFF",
        curr_streak_label="#FB8C00",
        side_labels="#FFFFFF",
        dates="#FFFFFF",
        excluded_days_label="#FFFFFF",
    ),
    "transparent": ThemeColors(
        background="#0000",
        border="#E4E2E2",
        stroke="#E4E2E2",
        ring="#FB8C00",
        fire="#FB8C00",
        curr_streak_num="#FB8C00",
        side_nums="#FB8C00",
        curr_streak_label="#FB8C00",
        side_labels="#FB8C00",
        dates="#8B949E",
        excluded_days_label="#8B949E",
    ),
    "radical": ThemeColors(
        background="#141321",
        border="#E4E2E2",
        stroke="#E4E2E2",
        ring="#FE428E",
        fire="#FE428E",
        curr_streak_num="#F8D847",
        side_nums="#FE428E",
        curr_streak_label="#F8D847",
        side_labels="#FE428E",
        dates="#A9FEF7",
        excluded_days_label="#A9FEF7",
    ),
    "merko": ThemeColors(
        background="#0A0F0B",
        border="#E4E2E2",
        stroke="#E4E2E2",
        ring="#B7D364",
        fire="#B7D364",
        curr_streak_num="#68B587",
        side_nums="#ABD200",
        curr_streak_label="#B7D364",
        side_labels="#ABD200",
        dates="#68B587",
        excluded_days_label="#68B587",
    ),
    "gruvbox": ThemeColors(
        background="#282828",
        border="#E4E2E2",
        stroke="#E4E2E2",
        ring="#FABD2F",
        fire="#FE8019",
        curr_streak_num="#8EC07C",
        side_nums="#FABD2F",
        curr_streak_label="#FE8019",
        side_labels="#FABD2F",
        dates="#8EC07C",
        excluded_days_label="#8EC07C",
    ),
    "gruvbox-duo": ThemeColors(
        background="#282828",
        border="#E4E2E2",
        stroke="#E4E2E2",
        ring="#FB4934",
        fire="#FB4934",
        curr_streak_num="#FBF1C7",
        side_nums="#FBF1C7",
        curr_streak_label="#FB4934",
        side_labels="#FBF1C7",
        dates="#A89984",
        excluded_days_label="#A89984",
    ),
    "tokyonight": ThemeColors(
        background="#1A1B27",
        border="#E4E2E2",
        stroke="#E4E2E2",
        ring="#70A5FD",
        fire="#BF91F3",
        curr_streak_num="#70A5FD",
        side_nums="#38BDAE",
        curr_streak_label="#70A5FD",
        side_labels="#38BDAE",
        dates="#A9B1D6",
        excluded_days_label="#A9B1D6",
    ),
    "tokyonight_duo": ThemeColors(
        background="#1A1B27",
        border="#E4E2E2",
        stroke="#E4E2E2",
        ring="#BF91F3",
        fire="#BF91F3",
        curr_streak_num="#70A5FD",
        side_nums="#70A5FD",
        curr_streak_label="#BF91F3",
        side_labels="#70A5FD",
        dates="#A9B1D6",
        excluded_days_label="#A9B1D6",
    ),
    "onedark": ThemeColors(
        background="#282C34",
        border="#E4E2E2",
        stroke="#E4E2E2",
        ring="#E4BF7A",
        fire="#8EB573",
        curr_streak_num="#E4BF7A",
        side_nums="#DF6D74",
        curr_streak_label="#8EB573",
        side_labels="#DF6D74",
        dates="#ABB2BF",
        excluded_days_label="#ABB2BF",
    ),
    "cobalt": ThemeColors(
        background="#193549",
        border="#E4E2E2",
        stroke="#E4E2E2",
        ring="#0480EF",
        fire="#E683D9",
        curr_streak_num="#75EEB2",
        side_nums="#E683D9",
        curr_streak_label="#0480EF",
        side_labels="#E683D9",
        dates="#75EEB2",
        excluded_days_label="#75EEB2",
    ),
    "synthwave": ThemeColors(
        background="#2B213A",
        border="#E4E2E2",
        stroke="#E4E2E2",
        ring="#E5289E",
        fire="#EF8539",
        curr_streak_num="#E5289E",
        side_nums="#EF8539",
        curr_streak_label="#E5289E",
        side_labels="#EF8539",
        dates="#E2E9EC",
        excluded_days_label="#E2E9EC",
    ),
    "dracula": ThemeColors(
        background="#282A36",
        border="#E4E2E2",
        stroke="#E4E2E2",
        ring="#FF6E96",
        fire="#FF6E96",
        curr_streak_num="#79DAFA",
        side_nums="#FF6E96",
        curr_streak_label="#79DAFA",
        side_labels="#FF6E96",
        dates="#F8F8F2",
        excluded_days_label="#F8F8F2",
    ),
    "prussian": ThemeColors(
        background="#172F45",
        border="#E4E2E2",
        stroke="#E4E2E2",
        ring="#38A0FF",
        fire="#38A0FF",
        curr_streak_num="#BDDFFF",
        side_nums="#6E93B5",
        curr_streak_label="#38A0FF",
        side_labels="#6E93B5",
        dates="#BDDFFF",
        excluded_days_label="#BDDFFF",
    ),
    "monokai": ThemeColors(
        background="#272822",
        border="#E4E2E2",
        stroke="#E4E2E2",
        ring="#EB1F6A",
        fire="#EB1F6A",
        curr_streak_num="#E28905",
        side_nums="#F1F1EB",
        curr_streak_label="#E28905",
        side_labels="#F1F1EB",
        dates="#F1F1EB",
        excluded_days_label="#F1F1EB",
    ),
    "vue": ThemeColors(
        background="#FFFEFE",
        border="#E4E2E2",
        stroke="#E4E2E2",
        ring="#41B883",
        fire="#41B883",
        curr_streak_num="#273849",
        side_nums="#41B883",
        curr_streak_label="#273849",
        side_labels="#41B883",
        dates="#273849",
        excluded_days_label="#273849",
    ),
    "vue-dark": ThemeColors(
        background="#273849",
        border="#E4E2E2",
        stroke="#E4E2E2",
        ring="#41B883",
        fire="#41B883",
        curr_streak_num="#FFFEFE",
        side_nums="#41B883",
        curr_streak_label="#FFFEFE",
        side_labels="#41B883",
        dates="#FFFEFE",
        excluded_days_label="#FFFEFE",
    ),
    "shades-of-purple": ThemeColors(
        background="#2D2B55",
        border="#E4E2E2",
        stroke="#E4E2E2",
        ring="#FAD000",
        fire="#FAD000",
        curr_streak_num="#A599E9",
        side_nums="#FAD000",
        curr_streak_label="#A599E9",
        side_labels="#FAD000",
        dates="#A599E9",
        excluded_days_label="#A599E9",
    ),
    "nightowl": ThemeColors(
        background="#011627",
        border="#E4E2E2",
        stroke="#E4E2E2",
        ring="#C792EA",
        fire="#C792EA",
        curr_streak_num="#7FDBCA",
        side_nums="#FFEB95",
        curr_streak_label="#C792EA",
        side_labels="#FFEB95",
        dates="#7FDBCA",
        excluded_days_label="#7FDBCA",
    ),
    "buefy": ThemeColors(
        background="#FFFEFE",
        border="#E4E2E2",
        stroke="#E4E2E2",
        ring="#7957D5",
        fire="#FF3860",
        curr_streak_num="#363636",
        side_nums="#7957D5",
        curr_streak_label="#FF3860",
        side_labels="#7957D5",
        dates="#363636",
        excluded_days_label="#363636",
    ),
    "blue-green": ThemeColors(
        background="#040F0F",
        border="#E4E2E2",
        stroke="#E4E2E2",
        ring="#2F97C1",
        fire="#0CF574",
        curr_streak_num="#2F97C1",
        side_nums="#0CF574",
        curr_streak_label="#2F97C1",
        side_labels="#0CF574",
        dates="#F8F8F2",
        excluded_days_label="#F8F8F2",
    ),
    "algolia": ThemeColors(
        background="#050F2C",
        border="#E4E2E2",
        stroke="#E4E2E2",
        ring="#00AEFF",
        fire="#00AEFF",
        curr_streak_num="#2DDE98",
        side_nums="#00AEFF",
        curr_streak_label="#2DDE98",
        side_labels="#00AEFF",
        dates="#FFFFFF",
        excluded_days_label="#FFFFFF",
    ),
    "great-gatsby": ThemeColors(
        background="#000000",
        border="#E4E2E2",
        stroke="#E4E2E2",
        ring="#FFA726",
        fire="#FFB74D",
        curr_streak_num="#FFA726",
        side_nums="#FFB74D",
        curr_streak_label="#FFA726",
        side_labels="#FFB74D",
        dates="#FFD95B",
        excluded_days_label="#FFD95B",
    ),
    "darcula": ThemeColors(
        background="#242424",
        border="#E4E2E2",
        stroke="#E4E2E2",
        ring="#F0A500",
        fire="#F0A500",
        curr_streak_num="#BA5F17",
        side_nums="#F0A500",
        curr_streak_label="#BA5F17",
        side_labels="#F0A500",
        dates="#84888D",
        excluded_days_label="#84888D",
    ),
    "solarized-dark": ThemeColors(
        background="#002B36",
        border="#E4E2E2",
        stroke="#E4E2E2",
        ring="#268BD2",
        fire="#B58900",
        curr_streak_num="#859900",
        side_nums="#268BD2",
        curr_streak_label="#B58900",
        side_labels="#268BD2",
        dates="#93A1A1",
        excluded_days_label="#93A1A1",
    ),
    "solarized-light": ThemeColors(
        background="#FDF6E3",
        border="#E4E2E2",
        stroke="#E4E2E2",
        ring="#268BD2",
        fire="#B58900",
        curr_streak_num="#859900",
        side_nums="#268BD2",
        curr_streak_label="#B58900",
        side_labels="#268BD2",
        dates="#586E75",
        excluded_days_label="#586E75",
    ),
    "nord": ThemeColors(
        background="#2E3440",
        border="#E4E2E2",
        stroke="#E4E2E2",
        ring="#88C0D0",
        fire="#88C0D0",
        curr_streak_num="#ECEFF4",
        side_nums="#81A1C1",
        curr_streak_label="#88C0D0",
        side_labels="#81A1C1",
        dates="#D8DEE9",
        excluded_days_label="#D8DEE9",
    ),
    "gotham": ThemeColors(
        background="#0C1014",
        border="#E4E2E2",
        stroke="#E4E2E2",
        ring="#2AA889",
        fire="#2AA889",
        curr_streak_num="#99D1CE",
        side_nums="#599CAB",
        curr_streak_label="#2AA889",
        side_labels="#599CAB",
        dates="#99D1CE",
        excluded_days_label="#99D1CE",
    ),
    "material-palenight": ThemeColors(
        background="#292D3E",
        border="#E4E2E2",
        stroke="#E4E2E2",
        ring="#C792EA",
        fire="#C792EA",
        curr_streak_num="#89DDFF",
        side_nums="#A6ACCD",
        curr_streak_label="#C792EA",
        side_labels="#A6ACCD",
        dates="#A6ACCD",
        excluded_days_label="#A6ACCD",
    ),
    "ayu-mirage": ThemeColors(
        background="#1F2430",
        border="#E4E2E2",
        stroke="#E4E2E2",
        ring="#F4CD7C",
        fire="#F4CD7C",
        curr_streak_num="#73D0FF",
        side_nums="#C7C8C2",
        curr_streak_label="#F4CD7C",
        side_labels="#C7C8C2",
        dates="#C7C8C2",
        excluded_days_label="#C7C8C2",
    ),
    "midnight-purple": ThemeColors(
        background="#000000",
        border="#E4E2E2",
        stroke="#E4E2E2",
        ring="#9745F5",
        fire="#9745F5",
        curr_streak_num="#FFFFFF",
        side_nums="#9F4BFF",
        curr_streak_label="#9745F5",
        side_labels="#9F4BFF",
        dates="#FFFFFF",
        excluded_days_label="#FFFFFF",
    ),
    "kacho_ga": ThemeColors(
        background="#402B23",
        border="#E4E2E2",
        stroke="#E4E2E2",
        ring="#BF4A3F",
        fire="#BF4A3F",
        curr_streak_num="#D9C8A9",
        side_nums="#F5D8C3",
        curr_streak_label="#BF4A3F",
        side_labels="#F5D8C3",
        dates="#D9C8A9",
        excluded_days_label="#D9C8A9",
    ),
    "green_nur": ThemeColors(
        background="#0D1117",
        border="#E4E2E2",
        stroke="#E4E2E2",
        ring="#16B77F",
        fire="#16B77F",
        curr_streak_num="#FFFFFF",
        side_nums="#16B77F",
        curr_streak_label="#FFFFFF",
        side_labels="#16B77F",
        dates="#8B949E",
        excluded_days_label="#8B949E",
    ),
    "neon_blue": ThemeColors(
        background="#060A20",
        border="#E4E2E2",
        stroke="#E4E2E2",
        ring="#00EAFF",
        fire="#00EAFF",
        curr_streak_num="#D8FBFF",
        side_nums="#00EAFF",
        curr_streak_label="#D8FBFF",
        side_labels="#00EAFF",
        dates="#6B9BD1",
        excluded_days_label="#6B9BD1",
    ),
    "github-dark": ThemeColors(
        background="#0D1117",
        border="#30363D",
        stroke="#30363D",
        ring="#58A6FF",
        fire="#F78166",
        curr_streak_num="#C9D1D9",
        side_nums="#58A6FF",
        curr_streak_label="#F78166",
        side_labels="#C9D1D9",
        dates="#8B949E",
        excluded_days_label="#8B949E",
    ),
    "github-dark-blue": ThemeColors(
        background="#0D1117",
        border="#30363D",
        stroke="#30363D",
        ring="#1F6FEB",
        fire="#1F6FEB",
        curr_streak_num="#C9D1D9",
        side_nums="#58A6FF",
        curr_streak_label="#1F6FEB",
        side_labels="#C9D1D9",
        dates="#8B949E",
        excluded_days_label="#8B949E",
    ),
    "github-light": ThemeColors(
        background="#FFFFFF",
        border="#D0D7DE",
        stroke="#D0D7DE",
        ring="#0969DA",
        fire="#CF222E",
        curr_streak_num="#24292F",
        side_nums="#0969DA",
        curr_streak_label="#CF222E",
        side_labels="#24292F",
        dates="#57606A",
        excluded_days_label="#57606A",
    ),
    "catppuccin-latte": ThemeColors(
        background="#EFF1F5",
        border="#CCD0DA",
        stroke="#CCD0DA",
        ring="#8839EF",
        fire="#FE640B",
        curr_streak_num="#4C4F69",
        side_nums="#1E66F5",
        curr_streak_label="#8839EF",
        side_labels="#4C4F69",
        dates="#6C6F85",
        excluded_days_label="#6C6F85",
    ),
    "catppuccin-mocha": ThemeColors(
        background="#1E1E2E",
        border="#313244",
        stroke="#313244",
        ring="#CBA6F7",
        fire="#FAB387",
        curr_streak_num="#CDD6F4",
        side_nums="#89B4FA",
        curr_streak_label="#CBA6F7",
        side_labels="#CDD6F4",
        dates="#A6ADC8",
        excluded_days_label="#A6ADC8",
    ),
    "shadow-red": ThemeColors(
        background="#1C1C1C",
        border="#E4E2E2",
        stroke="#E4E2E2",
        ring="#FF0000",
        fire="#FF0000",
        curr_streak_num="#FFFFFF",
        side_nums="#FF0000",
        curr_streak_label="#FF0000",
        side_labels="#FFFFFF",
        dates="#9E9E9E",
        excluded_days_label="#9E9E9E",
    ),
    "shadow-green": ThemeColors(
        background="#1C1C1C",
        border="#E4E2E2",
        stroke="#E4E2E2",
        ring="#00FF00",
        fire="#00FF00",
        curr_streak_num="#FFFFFF",
        side_nums="#00FF00",
        curr_streak_label="#00FF00",
        side_labels="#FFFFFF",
        dates="#9E9E9E",
        excluded_days_label="#9E9E9E",
    ),
    "shadow-blue": ThemeColors(
        background="#1C1C1C",
        border="#E4E2E2",
        stroke="#E4E2E2",
        ring="#00AAFF",
        fire="#00AAFF",
        curr_streak_num="#FFFFFF",
        side_nums="#00AAFF",
        curr_streak_label="#00AAFF",
        side_labels="#FFFFFF",
        dates="#9E9E9E",
        excluded_days_label="#9E9E9E",
    ),
    "calm": ThemeColors(
        background="#373F51",
        border="#E4E2E2",
        stroke="#E4E2E2",
        ring="#E07A5F",
        fire="#E07A5F",
        curr_streak_num="#EBCFB2",
        side_nums="#EBCFB2",
        curr_streak_label="#E07A5F",
        side_labels="#EBCFB2",
        dates="#C5B8A4",
        excluded_days_label="#C5B8A4",
    ),
    "blueberry": ThemeColors(
        background="#242938",
        border="#E4E2E2",
        stroke="#E4E2E2",
        ring="#82AAFF",
        fire="#82AAFF",
        curr_streak_num="#27E8A7",
        side_nums="#82AAFF",
        curr_streak_label="#27E8A7",
        side_labels="#82AAFF",
        dates="#AAAAAA",
        excluded_days_label="#AAAAAA",
    ),
    "sunset-gradient": ThemeColors(
        background="45,FF8A00,E52E71",
        border="#E4E2E2",
        stroke="#FFE3E3",
        ring="#FFF4D6",
        fire="#FFF4D6",
        curr_streak_num="#FFFFFF",
        side_nums="#FFFFFF",
        curr_streak_label="#FFF4D6",
        side_labels="#FFFFFF",
        dates="#FFE3E3",
        excluded_days_label="#FFE3E3",
    ),
    "ocean-gradient": ThemeColors(
        background="90,0F2027,203A43,2C5364",
        border="#2C5364",
        stroke="#7FB3C8",
        ring="#56CCF2",
        fire="#F2C94C",
        curr_streak_num="#FFFFFF",
        side_nums="#56CCF2",
        curr_streak_label="#56CCF2",
        side_labels="#E0F2FA",
        dates="#9FC5D6",
        excluded_days_label="#9FC5D6",
    ),
    "aurora-gradient": ThemeColors(
        background="135,2B5876,4E4376",
        border="#4E4376",
        stroke="#A3A0D8",
        ring="#7AF3D0",
        fire="#FFB86C",
        curr_streak_num="#FFFFFF",
        side_nums="#7AF3D0",
        curr_streak_label="#7AF3D0",
        side_labels="#E8E6FF",
        dates="#C0BDE8",
        excluded_days_label="#C0BDE8",
    ),
}

if DEFAULT_THEME_NAME not in THEMES:
    raise ThemeRegistryError(f"Theme registry is missing its '{DEFAULT_THEME_NAME}' entry")


def get_theme(name: str) -> ThemeColors | None:
    return THEMES.get(name)


def list_themes() -> list[str]:
    return list(THEMES.keys())


def theme_count() -> int:
    return len(THEMES)
