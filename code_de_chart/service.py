"""Chart generation service: prompt -> completion -> extraction -> fallback.

`ChartService.generate` always returns a renderable document. Missing input
is the only error raised to the caller; an unreachable model, an unusable
completion or a failing extractor all end in the chart type's fallback.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .classifier import classify
from .extractors import (
    MIN_DOCUMENT_LENGTH,
    extract_class,
    extract_flowchart,
    extract_gantt,
    extract_git,
    extract_journey,
    extract_mindmap,
    extract_pie,
    extract_quadrant,
    extract_sequence,
    extract_state,
)
from .fallbacks import build_fallback
from .llm import ChartCompleter, Completer
from .models import ChartRequest, ChartResult, Completion, DiagramType, InputCategory, InputKind
from .prompts import (
    class_prompt,
    flowchart_prompt,
    gantt_prompt,
    git_prompt,
    journey_prompt,
    mindmap_prompt,
    pie_prompt,
    quadrant_prompt,
    sequence_prompt,
    state_prompt,
    timeline_prompt,
)
from .reconstructor import MINIMAL_FLOWCHART
from .sanitizer import sanitize

logger = logging.getLogger(__name__)


class MissingInputError(ValueError):
    """Raised when a request carries no input text."""


@dataclass(frozen=True)
class ChartPipeline:
    """Prompt builder, extractor and fallback for one chart type."""
    prompt: Callable[[ChartRequest], str]
    extract: Callable[[str], str]
    fallback: Callable[[str, DiagramType, InputKind], str] = build_fallback


CHART_PIPELINES: dict[DiagramType, ChartPipeline] = {
    DiagramType.FLOWCHART: ChartPipeline(flowchart_prompt, extract_flowchart),
    DiagramType.MINDMAP: ChartPipeline(mindmap_prompt, extract_mindmap),
    DiagramType.GANTT: ChartPipeline(gantt_prompt, extract_gantt),
    DiagramType.PIE: ChartPipeline(pie_prompt, extract_pie),
    DiagramType.QUADRANT: ChartPipeline(quadrant_prompt, extract_quadrant),
    DiagramType.JOURNEY: ChartPipeline(journey_prompt, extract_journey),
    DiagramType.GIT: ChartPipeline(git_prompt, extract_git),
    DiagramType.STATE: ChartPipeline(state_prompt, extract_state),
    DiagramType.CLASS: ChartPipeline(class_prompt, extract_class),
    DiagramType.TIMELINE: ChartPipeline(timeline_prompt, extract_flowchart),
    DiagramType.SEQUENCE: ChartPipeline(sequence_prompt, extract_sequence),
}


def resolve_request(request: ChartRequest) -> tuple[ChartRequest, DiagramType]:
    """Pick the chart type for a request.

    An explicit chart_type always wins. Without one, the classifier picks the
    type, and input it recognizes as source code is treated as code.
    """
    if request.chart_type:
        return request, DiagramType.from_alias(request.chart_type)

    category = classify(request.text)
    if category == InputCategory.CODE:
        request = request.model_copy(update={"input_kind": InputKind.CODE})
    return request, DiagramType.from_alias(category.value)


def finalize(request: ChartRequest, chart_type: DiagramType, completion: Completion) -> ChartResult:
    """Turn a completion into a ChartResult, falling back where needed."""
    pipeline = CHART_PIPELINES[chart_type]

    def fallback_result(**fields) -> ChartResult:
        return ChartResult(
            chart_type=chart_type,
            mermaid_code=pipeline.fallback(sanitize(request.text), chart_type, request.input_kind),
            fallback=True,
            input_kind=request.input_kind,
            **fields,
        )

    if not completion.success:
        logger.warning("No completion for %s chart, using fallback: %s", chart_type.value, completion.error)
        return fallback_result(success=False, error=completion.error or "Completion failed")

    try:
        document = pipeline.extract(completion.content)
    except Exception as e:
        logger.warning("Extracting %s chart failed: %s", chart_type.value, e)
        return fallback_result(raw_response=completion.content, error=str(e),
                               warning="Used fallback because extraction failed")

    if not document or len(document) < MIN_DOCUMENT_LENGTH:
        logger.info("No usable %s chart in completion, using fallback", chart_type.value)
        return fallback_result(raw_response=completion.content,
                               warning="Used fallback due to insufficient generated content")

    return ChartResult(
        chart_type=chart_type,
        mermaid_code=document,
        raw_response=completion.content,
        fallback=document == MINIMAL_FLOWCHART,
        input_kind=request.input_kind,
    )


class ChartService:
    """Generates Mermaid charts with a completion model."""

    def __init__(self, completer: Optional[Completer] = None):
        self.completer = completer or ChartCompleter.from_env()

    async def _complete(self, prompt: str) -> Completion:
        try:
            return await self.completer.complete(prompt)
        except Exception as e:
            logger.warning("Completer raised: %s", e)
            return Completion(success=False, error=str(e))

    async def generate(self, request: ChartRequest) -> ChartResult:
        """Generate a chart for the request."""
        if not request.text or not request.text.strip():
            raise MissingInputError("Input text is required")

        request, chart_type = resolve_request(request)
        logger.info("Generating %s chart (%s input, %d chars)",
                    chart_type.value, request.input_kind.value, len(request.text))

        prompt = CHART_PIPELINES[chart_type].prompt(request)
        completion = await self._complete(prompt)
        return finalize(request, chart_type, completion)

    async def _generate_as(self, chart_type: DiagramType, text: str,
                           input_kind: InputKind = InputKind.TEXT,
                           language: str = "javascript") -> ChartResult:
        request = ChartRequest(text=text, chart_type=chart_type.value,
                               input_kind=input_kind, language=language)
        return await self.generate(request)

    async def flowchart(self, text: str, input_kind: InputKind = InputKind.CODE,
                        language: str = "javascript") -> ChartResult:
        return await self._generate_as(DiagramType.FLOWCHART, text, input_kind, language)

    async def mindmap(self, text: str, input_kind: InputKind = InputKind.TEXT,
                      language: str = "javascript") -> ChartResult:
        return await self._generate_as(DiagramType.MINDMAP, text, input_kind, language)

    async def sequence(self, text: str, input_kind: InputKind = InputKind.TEXT,
                       language: str = "javascript") -> ChartResult:
        return await self._generate_as(DiagramType.SEQUENCE, text, input_kind, language)

    async def gantt(self, text: str) -> ChartResult:
        return await self._generate_as(DiagramType.GANTT, text)

    async def pie(self, text: str) -> ChartResult:
        return await self._generate_as(DiagramType.PIE, text)

    async def quadrant(self, text: str) -> ChartResult:
        return await self._generate_as(DiagramType.QUADRANT, text)

    async def journey(self, text: str) -> ChartResult:
        return await self._generate_as(DiagramType.JOURNEY, text)

    async def git(self, text: str) -> ChartResult:
        return await self._generate_as(DiagramType.GIT, text)

    async def state(self, text: str) -> ChartResult:
        return await self._generate_as(DiagramType.STATE, text)

    async def class_diagram(self, text: str) -> ChartResult:
        return await self._generate_as(DiagramType.CLASS, text)

    async def timeline(self, text: str) -> ChartResult:
        return await self._generate_as(DiagramType.TIMELINE, text)
