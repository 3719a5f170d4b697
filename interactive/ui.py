"""Prompt palette shared by every dialogue step."""

from questionary import Style

STYLE = Style(
    [
        ("qmark", "fg:#5f87ff bold"),
        ("question", "bold"),
        ("instruction", "fg:#808080 italic"),
        ("answer", "fg:#5fd787 bold"),
        ("pointer", "fg:#5f87ff bold"),
        ("highlighted", "fg:#5f87ff"),
        ("selected", "fg:#5fd787"),
        ("separator", "fg:#585858"),
        ("disabled", "fg:#585858 italic"),
    ]
)
