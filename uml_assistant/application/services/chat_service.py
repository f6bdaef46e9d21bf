"""
Chat service for one conversational turn.

Orchestrates the full turn: classification and retrieval (concurrently),
category-specific generation, the diagram refinement sub-pipeline, the
evaluation tag, and persistence of the conversation.

Dependencies: uml_assistant.core, uml_assistant.boundary.db
System role: Chat pipeline orchestration layer
"""

import asyncio
import logging
from typing import Callable, Sequence

from langchain_core.documents import Document
from langchain_core.prompts import PromptTemplate
from pydantic import BaseModel, ConfigDict
from sqlalchemy.ext.asyncio import AsyncSession

from uml_assistant.boundary.db.CRUD.conversation_crud import ConversationCRUD, conversation_crud
from uml_assistant.core.agentic_system.agent.request_classifier import RequestClassifier
from uml_assistant.core.agentic_system.agent.response_generator import ResponseGenerator
from uml_assistant.core.agentic_system.diagram_agent import (
    DiagramRefiner,
    extract_plantuml,
    format_image_markdown,
    has_plantuml_marker,
)
from uml_assistant.core.agentic_system.pipeline_schema import (
    ClassificationResult,
    ConversationTurn,
    PipelineResult,
    RequestCategory,
    format_chat_history,
)
from uml_assistant.core.agentic_system.prompts import get_response_prompt
from uml_assistant.core.conversation_ids import (
    conversation_path,
    conversation_title,
    generate_conversation_id,
    now_ms,
)
from uml_assistant.core.exceptions import (
    CapabilityError,
    CompletionError,
    ConversationNotFoundError,
    ConversationStoreError,
    ValidationError,
)
from uml_assistant.core.retriever import ContextRetriever
from uml_assistant.observability.correlation import bind_conversation_id

logger = logging.getLogger(__name__)


class TurnOutcome(BaseModel):
    """Result of a processed turn."""

    model_config = ConfigDict(frozen=True)

    conversation_id: str
    category: RequestCategory
    raw_label: str
    text: str


class ChatService:
    """
    Chat service for the UML assistant.

    Drives classifier, retriever, generator and diagram refiner for a single
    turn and writes the resulting conversation exactly once.
    """

    def __init__(
        self,
        db: AsyncSession,
        classifier: RequestClassifier,
        retriever: ContextRetriever,
        generator: ResponseGenerator,
        refiner: DiagramRefiner,
        store: ConversationCRUD = conversation_crud,
        prompt_label: str | None = None,
        id_factory: Callable[[], str] = generate_conversation_id,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        """
        Initialize chat service.

        Args:
            db: AsyncSession for conversation persistence
            classifier: Request classifier (stage model)
            retriever: Context retriever
            generator: Response generator (generation model)
            refiner: Diagram refiner
            store: Conversation CRUD
            prompt_label: Optional Langfuse label for prompt versions
            id_factory: Conversation id generator
            clock: Millisecond clock for created_at and index score
        """
        self.db = db
        self.classifier = classifier
        self.retriever = retriever
        self.generator = generator
        self.refiner = refiner
        self.store = store
        self.prompt_label = prompt_label
        self._id_factory = id_factory
        self._clock = clock

    async def process_turn(
        self,
        user_id: str,
        messages: Sequence[ConversationTurn],
        conversation_id: str | None = None,
    ) -> TurnOutcome:
        """
        Process one conversational turn.

        Flow:
        1. Classify and retrieve context concurrently
        2. Generate the first answer with the category template
        3. For diagram answers carrying a diagram, refine it
        4. Append the evaluation tag
        5. Persist the conversation and index it for the user

        Args:
            user_id: Authenticated user id
            messages: Full conversation so far, latest user message last
            conversation_id: Existing conversation id, None for a new conversation

        Returns:
            TurnOutcome: Conversation id, category and assembled text

        Raises:
            ValidationError: If messages is empty
            ConversationNotFoundError: If conversation_id belongs to another user
            CapabilityError: If a model, retrieval or store call fails (nothing is written)
        """
        if not messages:
            raise ValidationError("At least one message is required", field="messages")

        if conversation_id is not None:
            await self._ensure_owner(user_id, conversation_id)

        conversation_id = conversation_id or self._id_factory()
        bind_conversation_id(conversation_id)
        logger.info(
            f"{__name__}:process_turn - START user_id={user_id} "
            f"conversation_id={conversation_id} messages={len(messages)}"
        )

        chat_history = format_chat_history(messages)
        user_input = messages[-1].content

        # Step 1: classification and retrieval are independent; a failure in one cancels the other
        try:
            async with asyncio.TaskGroup() as tg:
                classify_task = tg.create_task(self._classify(chat_history, user_input))
                retrieve_task = tg.create_task(self.retriever.aretrieve(user_input))
        except ExceptionGroup as eg:
            raise eg.exceptions[0]
        classification = classify_task.result()
        context_docs = retrieve_task.result()
        category = classification.effective_category()
        logger.info(
            f"{__name__}:process_turn - Classified raw={classification.raw_label!r} "
            f"category={category.value} context_docs={len(context_docs)}"
        )

        # Step 2: first-pass answer
        result = PipelineResult(category=category)
        draft = await self._generate(
            "generate",
            get_response_prompt(category, label=self.prompt_label),
            {"chat_history": chat_history, "input": user_input},
            context_docs,
        )
        result = result.with_text(draft)

        # Step 3: diagram refinement
        if category is RequestCategory.DIAGRAM:
            result = await self._refine_diagram(result, chat_history, user_input, context_docs)

        # Step 4: evaluation tag
        result = result.with_category_tag()
        assistant_turn = result.seal()

        # Step 5: persistence
        await self._persist(user_id, conversation_id, messages, assistant_turn)

        logger.info(
            f"{__name__}:process_turn - END conversation_id={conversation_id} "
            f"category={category.value} text_len={len(assistant_turn.content)}"
        )
        return TurnOutcome(
            conversation_id=conversation_id,
            category=category,
            raw_label=classification.raw_label,
            text=assistant_turn.content,
        )

    async def _ensure_owner(self, user_id: str, conversation_id: str) -> None:
        """Refuse to continue a conversation stored under another user."""
        try:
            existing = await self.store.get_by_id(self.db, conversation_id)
        except Exception as e:
            logger.error(f"{__name__}:_ensure_owner - FAILED {type(e).__name__}: {e}")
            raise ConversationStoreError(
                "Failed to read conversation",
                operation="read",
                details={"conversation_id": conversation_id},
            ) from e

        if existing is not None and existing.user_id != user_id:
            logger.warning(
                f"{__name__}:_ensure_owner - conversation_id={conversation_id} not owned by user_id={user_id}"
            )
            raise ConversationNotFoundError(conversation_id)

    async def _classify(self, chat_history: str, user_input: str) -> ClassificationResult:
        try:
            return await self.classifier.aclassify(chat_history, user_input, label=self.prompt_label)
        except CapabilityError:
            raise
        except Exception as e:
            logger.error(f"{__name__}:_classify - FAILED {type(e).__name__}: {e}")
            raise CompletionError("Request classification failed", operation="classify") from e

    async def _generate(
        self,
        operation: str,
        template: PromptTemplate,
        variables: dict[str, str],
        context_docs: Sequence[Document],
    ) -> str:
        try:
            return await self.generator.agenerate(template, variables, context_docs)
        except Exception as e:
            logger.error(f"{__name__}:_generate - FAILED operation={operation} {type(e).__name__}: {e}")
            raise CompletionError("Response generation failed", operation=operation) from e

    async def _refine_diagram(
        self,
        result: PipelineResult,
        chat_history: str,
        user_input: str,
        context_docs: Sequence[Document],
    ) -> PipelineResult:
        """Replace the draft with the finalized explanation and image link when refinement completes."""
        if not has_plantuml_marker(result.text):
            logger.info(f"{__name__}:_refine_diagram - No PlantUML marker, keeping draft")
            return result

        diagram = extract_plantuml(result.text)
        if diagram is None:
            logger.info(f"{__name__}:_refine_diagram - Marker without extractable diagram, keeping draft")
            return result

        try:
            outcome = await self.refiner.arefine(
                diagram,
                chat_history,
                user_input,
                context_docs,
                prompt_label=self.prompt_label,
            )
        except Exception as e:
            logger.error(f"{__name__}:_refine_diagram - FAILED {type(e).__name__}: {e}")
            raise CompletionError("Diagram refinement failed", operation="refine") from e

        if not outcome.finalized:
            logger.info(f"{__name__}:_refine_diagram - Verification yielded no diagram, keeping draft")
            return result

        return result.with_text(outcome.explanation or "").append(format_image_markdown(outcome.image_url))

    async def _persist(
        self,
        user_id: str,
        conversation_id: str,
        messages: Sequence[ConversationTurn],
        assistant_turn: ConversationTurn,
    ) -> None:
        """Write the full record and the user index entry in one transaction."""
        created_at = self._clock()
        record = {
            "user_id": user_id,
            "title": conversation_title(messages[0].content),
            "created_at": created_at,
            "path": conversation_path(conversation_id),
            "messages": [turn.model_dump() for turn in [*messages, assistant_turn]],
        }
        try:
            await self.store.append(self.db, conversation_id, record)
            await self.store.index_by_user(self.db, user_id, conversation_id, created_at)
            await self.db.commit()
        except Exception as e:
            logger.error(f"{__name__}:_persist - FAILED {type(e).__name__}: {e}")
            await self.db.rollback()
            raise ConversationStoreError(
                "Failed to persist conversation",
                operation="append",
                details={"conversation_id": conversation_id},
            ) from e
