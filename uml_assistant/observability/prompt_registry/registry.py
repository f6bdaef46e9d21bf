"""
Langfuse prompt registry for versioned prompt management.

Singleton registry that versions the pipeline's LangChain text templates in
Langfuse together with their model configuration.

Dependencies: langfuse, uml_assistant.configs, uml_assistant.observability.prompt_registry
System role: Prompt version control and retrieval
"""

import logging
from typing import TYPE_CHECKING, Any

from langchain_core.prompts import PromptTemplate
from langfuse import Langfuse

from uml_assistant.configs import get_settings
from uml_assistant.observability.prompt_registry.converter import (
    from_langfuse_text,
    to_langfuse_text,
)
from uml_assistant.observability.prompt_registry.models import ModelConfig

if TYPE_CHECKING:
    from langfuse.model import TextPromptClient

logger = logging.getLogger(__name__)


class PromptRegistry:
    """
    Singleton registry for Langfuse prompt management.

    Inactive (every call a no-op returning None) unless tracing is enabled
    and both Langfuse keys are configured.

    Example:
        >>> registry = PromptRegistry()
        >>> registry.register_prompt(
        ...     name="uml-general",
        ...     template=PromptTemplate.from_template("Answer {input}"),
        ...     config=ModelConfig(model="gemini-2.5-pro", temperature=0.7),
        ...     labels=["production"],
        ... )
    """

    _instance: "PromptRegistry | None" = None
    _client: Langfuse | None = None
    _enabled: bool = False

    def __new__(cls) -> "PromptRegistry":
        """Singleton pattern for registry instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialize()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the singleton so the next construction re-reads settings."""
        cls._instance = None

    def _initialize(self) -> None:
        """Initialize Langfuse client with configuration."""
        obs_settings = get_settings().observability

        if not obs_settings.enable_tracing:
            logger.info(f"{__name__}:_initialize - Langfuse tracing disabled, prompt registry inactive")
            self._enabled = False
            return

        if not obs_settings.langfuse_public_key or not obs_settings.langfuse_secret_key:
            logger.warning(f"{__name__}:_initialize - Langfuse keys not configured, prompt registry inactive")
            self._enabled = False
            return

        self._client = Langfuse(
            public_key=obs_settings.langfuse_public_key,
            secret_key=obs_settings.langfuse_secret_key,
            host=obs_settings.langfuse_host,
        )
        self._enabled = True
        logger.info(f"{__name__}:_initialize - Prompt registry initialized: host={obs_settings.langfuse_host}")

    @property
    def is_enabled(self) -> bool:
        """Check if registry is active."""
        return self._enabled

    def register_prompt(
        self,
        name: str,
        template: PromptTemplate,
        config: ModelConfig,
        labels: list[str] | None = None,
    ) -> "TextPromptClient | None":
        """
        Register or version a text prompt in Langfuse.

        Args:
            name: Unique prompt identifier
            template: LangChain PromptTemplate
            config: Model configuration to store with prompt
            labels: Optional labels (e.g., ["production"])

        Returns:
            Created Langfuse prompt, or None if disabled
        """
        if not self._enabled or self._client is None:
            logger.debug(f"{__name__}:register_prompt - Registry disabled, skipping name={name}")
            return None

        labels = labels or []
        prompt = self._client.create_prompt(
            name=name,
            type="text",
            prompt=to_langfuse_text(template),
            config=config.to_langfuse_config(),
            labels=labels,
        )
        logger.info(
            f"{__name__}:register_prompt - Registered name={name} version={prompt.version} labels={labels}"
        )
        return prompt

    def get_prompt(self, name: str, label: str | None = None) -> "TextPromptClient | None":
        """
        Fetch a prompt from Langfuse.

        Returns:
            Langfuse prompt object, or None if disabled
        """
        if not self._enabled or self._client is None:
            logger.debug(f"{__name__}:get_prompt - Registry disabled, cannot fetch name={name}")
            return None

        kwargs: dict[str, Any] = {"name": name, "type": "text"}
        if label:
            kwargs["label"] = label

        prompt = self._client.get_prompt(**kwargs)
        logger.debug(f"{__name__}:get_prompt - Fetched name={name} version={prompt.version}")
        return prompt

    def get_langchain_prompt(self, name: str, label: str | None = None) -> PromptTemplate | None:
        """
        Fetch a prompt from Langfuse as a LangChain PromptTemplate.

        Returns:
            PromptTemplate with the Langfuse prompt attached as metadata, or None
        """
        prompt = self.get_prompt(name, label=label)
        if prompt is None:
            return None

        template = from_langfuse_text(prompt.prompt)
        template.metadata = {"langfuse_prompt": prompt}
        return template
