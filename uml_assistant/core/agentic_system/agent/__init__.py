"""
Pipeline agents: request classifier, response generator and chat model factory.
"""

from uml_assistant.core.agentic_system.agent.chat_models import (
    create_generation_model,
    create_stage_model,
)
from uml_assistant.core.agentic_system.agent.request_classifier import RequestClassifier
from uml_assistant.core.agentic_system.agent.response_generator import ResponseGenerator

__all__ = [
    "RequestClassifier",
    "ResponseGenerator",
    "create_generation_model",
    "create_stage_model",
]
