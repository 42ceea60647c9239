import uuid
from dataclasses import dataclass, field, replace
from enum import Enum

from ClipAI.clipboard.persistence import AI_CONFIGS_RECORD, SELECTED_CONFIG_RECORD, JsonRecordStore
from ClipAI.config import config
from ClipAI.runtime import log_event

DEFAULT_PROMPT = "Please analyse and summarise the following content:"


class OutputType(str, Enum):
    TEXT = "text"
    IMAGE = "image"


class ImageSize(str, Enum):
    SIZE_1K = "1K"
    SIZE_2K = "2K"
    SIZE_4K = "4K"


class AspectRatio(str, Enum):
    RATIO_1X1 = "1:1"
    RATIO_3X4 = "3:4"
    RATIO_4X3 = "4:3"
    RATIO_16X9 = "16:9"
    RATIO_9X16 = "9:16"


def _enum_or(enum_cls, value, default):
    try:
        return enum_cls(value)
    except ValueError:
        return default


# Presets used to pre-fill a new profile: (endpoint, model)
PROVIDERS = {
    "Google Gemini": ("https://generativelanguage.googleapis.com/v1beta/models/", "gemini-pro"),
    "OpenAI": ("https://api.openai.com/v1/chat/completions", "gpt-4"),
    "Anthropic Claude": ("https://api.anthropic.com/v1/messages", "claude-3-opus-20240229"),
    "Custom": ("", ""),
}


@dataclass
class AIConfig:
    name: str
    api_key: str = ""
    api_endpoint: str = ""
    model: str = ""
    custom_prompt: str = DEFAULT_PROMPT
    output_type: OutputType = OutputType.TEXT
    image_size: ImageSize = ImageSize.SIZE_2K
    aspect_ratio: AspectRatio = AspectRatio.RATIO_3X4
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def wants_image(self):
        return self.output_type is OutputType.IMAGE

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "api_key": self.api_key,
            "api_endpoint": self.api_endpoint,
            "model": self.model,
            "custom_prompt": self.custom_prompt,
            "output_type": self.output_type.value,
            "image_size": self.image_size.value,
            "aspect_ratio": self.aspect_ratio.value,
        }

    @classmethod
    def from_dict(cls, row):
        if not isinstance(row, dict):
            raise ValueError("profile record must be an object")
        for key in ("id", "name", "api_endpoint", "model"):
            if not isinstance(row.get(key), str):
                raise ValueError(f"profile record is missing {key}")
        return cls(
            id=row["id"],
            name=row["name"],
            api_key=str(row.get("api_key") or ""),
            api_endpoint=row["api_endpoint"],
            model=row["model"],
            custom_prompt=str(row.get("custom_prompt") or ""),
            output_type=_enum_or(OutputType, row.get("output_type"), OutputType.TEXT),
            image_size=_enum_or(ImageSize, row.get("image_size"), ImageSize.SIZE_2K),
            aspect_ratio=_enum_or(AspectRatio, row.get("aspect_ratio"), AspectRatio.RATIO_3X4),
        )


def default_profile():
    return AIConfig(
        name="Default",
        api_key=getattr(config, "ai_default_api_key", "") or "",
        api_endpoint=getattr(config, "ai_default_endpoint", PROVIDERS["Google Gemini"][0]),
        model=getattr(config, "ai_default_model", PROVIDERS["Google Gemini"][1]),
        custom_prompt=DEFAULT_PROMPT,
        output_type=OutputType.TEXT,
    )


def profile_from_provider(provider, name=None, api_key=""):
    endpoint, model = PROVIDERS.get(provider, PROVIDERS["Custom"])
    return AIConfig(name=name or provider, api_key=api_key, api_endpoint=endpoint, model=model)


class ProfileStore:
    """AI profiles plus the selected-profile pointer, persisted as two records."""

    def __init__(self, *, base_dir=None):
        self._configs = JsonRecordStore(AI_CONFIGS_RECORD, base_dir=base_dir)
        self._selected = JsonRecordStore(SELECTED_CONFIG_RECORD, base_dir=base_dir)
        self._default = None

    def _fallback(self):
        # One default per store so its id survives select/upsert before anything is saved.
        if self._default is None:
            self._default = default_profile()
        return [replace(self._default)]

    def load_all(self):
        rows = self._configs.load(default=None)
        if rows is None:
            return self._fallback()
        if not isinstance(rows, list):
            log_event("persistence_read_failed", record=AI_CONFIGS_RECORD, error="expected a list")
            return self._fallback()
        try:
            profiles = [AIConfig.from_dict(r) for r in rows]
        except (ValueError, TypeError) as e:
            log_event("persistence_read_failed", record=AI_CONFIGS_RECORD, error=str(e))
            return self._fallback()
        return profiles or self._fallback()

    def save_all(self, profiles):
        return self._configs.save([p.to_dict() for p in profiles])

    def load_selected_id(self):
        data = self._selected.load(default={})
        if not isinstance(data, dict):
            return None
        value = data.get("selected_id")
        return str(value) if value else None

    def save_selected_id(self, profile_id):
        return self._selected.save({"selected_id": str(profile_id)})

    def selected(self, profiles=None):
        """The selected profile; a dangling or missing id falls back to the first."""
        profiles = profiles if profiles is not None else self.load_all()
        selected_id = self.load_selected_id()
        for p in profiles:
            if p.id == selected_id:
                return p
        return profiles[0] if profiles else self._fallback()[0]

    def select(self, profile_id):
        profiles = self.load_all()
        if not any(p.id == profile_id for p in profiles):
            return False
        if self._configs.load(default=None) is None:
            self.save_all(profiles)
        return self.save_selected_id(profile_id)

    def upsert(self, profile):
        profiles = self.load_all()
        for i, p in enumerate(profiles):
            if p.id == profile.id:
                profiles[i] = profile
                break
        else:
            profiles.append(profile)
        return self.save_all(profiles)

    def delete(self, profile_id):
        """Remove a profile; if it was selected, selection moves to the first remaining one."""
        profiles = self.load_all()
        kept = [p for p in profiles if p.id != profile_id]
        if len(kept) == len(profiles):
            return False
        was_selected = self.load_selected_id() == profile_id
        self.save_all(kept)
        if not kept:
            self._default = None
        if was_selected and kept:
            self.save_selected_id(kept[0].id)
        return True
