"""code.de.chart - LLM-driven Mermaid chart generation with guaranteed fallbacks."""

from .models import (
    DiagramType,
    InputCategory,
    InputKind,
    FlowEdge,
    FlowGraph,
    ChartRequest,
    ChartResult,
    ChartSuggestion,
    Completion,
)

from .config import (
    ModelProvider,
    ModelConfig,
    get_model_config,
    get_model_name,
    get_ollama_base_url,
    print_config,
)

from .sanitizer import sanitize

from .classifier import (
    classify,
    suggest_chart_types,
)

from .extractors import (
    extract_chart,
    extract_flowchart,
    extract_mindmap,
    extract_sequence,
)

from .reconstructor import (
    FlowchartReconstructor,
    reconstruct_flowchart,
    MINIMAL_FLOWCHART,
)

from .fallbacks import (
    build_fallback,
    build_mindmap_fallback,
)

from .llm import ChartCompleter

from .service import (
    ChartService,
    ChartPipeline,
    CHART_PIPELINES,
    MissingInputError,
    finalize,
    resolve_request,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Models
    "DiagramType",
    "InputCategory",
    "InputKind",
    "FlowEdge",
    "FlowGraph",
    "ChartRequest",
    "ChartResult",
    "ChartSuggestion",
    "Completion",
    # Config
    "ModelProvider",
    "ModelConfig",
    "get_model_config",
    "get_model_name",
    "get_ollama_base_url",
    "print_config",
    # Normalization
    "sanitize",
    "classify",
    "suggest_chart_types",
    "extract_chart",
    "extract_flowchart",
    "extract_mindmap",
    "extract_sequence",
    "FlowchartReconstructor",
    "reconstruct_flowchart",
    "MINIMAL_FLOWCHART",
    "build_fallback",
    "build_mindmap_fallback",
    # Service
    "ChartCompleter",
    "ChartService",
    "ChartPipeline",
    "CHART_PIPELINES",
    "MissingInputError",
    "finalize",
    "resolve_request",
]
