"""
Chat model factory.

Dependencies: langchain.chat_models, uml_assistant.configs
System role: Completion capability construction
"""

import logging

from langchain.chat_models import init_chat_model
from langchain_core.language_models import BaseChatModel

from uml_assistant.configs import get_settings

logger = logging.getLogger(__name__)


def create_chat_model(model_id: str | None = None, temperature: float | None = None) -> BaseChatModel:
    """
    Create a chat model for the configured provider.

    Args:
        model_id: Model identifier (defaults to the generation model)
        temperature: Sampling temperature (defaults to the configured value)

    Returns:
        BaseChatModel: Non-streaming chat model
    """
    llm_settings = get_settings().llm
    model_id = model_id or llm_settings.generation_model
    temperature = llm_settings.temperature if temperature is None else temperature

    logger.info(
        f"{__name__}:create_chat_model - provider={llm_settings.provider} "
        f"model={model_id} temperature={temperature}"
    )
    return init_chat_model(
        model_id,
        model_provider=llm_settings.provider,
        temperature=temperature,
    )


def create_generation_model() -> BaseChatModel:
    """Model for drafted and final answers."""
    return create_chat_model(get_settings().llm.generation_model)


def create_stage_model() -> BaseChatModel:
    """Model for classification and the highlight/verify diagram stages."""
    return create_chat_model(get_settings().llm.stage_model)
