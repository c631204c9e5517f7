"""Internationalization feature settings."""

from pydantic import Field, field_validator

from editor_utils.configuration.base import FeatureSettings


class I18nSettings(FeatureSettings):
    """Translation and locale configuration.

    Environment Variables:
        I18N_DEFAULT_UI_LANGUAGE: UI language used when a Locale is created
            without one (default: "en")
        I18N_RTL_LANGUAGE_CODES: Language codes written right-to-left, as a
            JSON list (e.g. '["ar", "he"]')
        I18N_PLURAL_FORMS_KEY: Reserved message key holding a PO-style
            plural-forms header (default: "PLURAL_FORMS")

    Example:
        ```python
        from editor_utils.configuration import settings

        if language in settings.i18n.RTL_LANGUAGE_CODES:
            ...
        ```
    """

    DEFAULT_UI_LANGUAGE: str = Field(default="en", alias="I18N_DEFAULT_UI_LANGUAGE")
    RTL_LANGUAGE_CODES: list[str] = Field(
        default=["ar", "fa", "he", "ku", "ug"],
        alias="I18N_RTL_LANGUAGE_CODES",
    )
    PLURAL_FORMS_KEY: str = Field(default="PLURAL_FORMS", alias="I18N_PLURAL_FORMS_KEY")

    @field_validator("RTL_LANGUAGE_CODES", mode="before")
    @classmethod
    def split_language_codes(cls, v):
        """Accept a comma-separated string passed directly as well as a list.

        Args:
            cls: The class itself.
            v: The raw value of the RTL_LANGUAGE_CODES field.

        Returns:
            List of stripped, non-empty language codes.
        """
        if isinstance(v, str):
            return [code.strip() for code in v.split(",") if code.strip()]
        return v
