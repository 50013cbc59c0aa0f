"""Project tools: default configuration, usage audit and Graphlit Q&A."""

from __future__ import annotations

from typing import Any

from graphlit_mcp.query.pagination import clean_usage_record, collect_pages
from graphlit_mcp.remote.enums import ModelServiceTypes, SpecificationTypes
from graphlit_mcp.tools.base import GraphlitTool
from graphlit_mcp.tools.result import ToolResult
from graphlit_mcp.tools.schema import boolean, choice, obj, string
from graphlit_mcp.utils.duration import recency_cutoff
from graphlit_mcp.utils.exceptions import ValidationError

# model per (service, specification type)
_MODELS: dict[tuple[str, str], tuple[str, str]] = {
    ("ANTHROPIC", "COMPLETION"): ("anthropic", "CLAUDE_3_7_SONNET"),
    ("ANTHROPIC", "PREPARATION"): ("anthropic", "CLAUDE_3_7_SONNET"),
    ("ANTHROPIC", "EXTRACTION"): ("anthropic", "CLAUDE_3_7_SONNET"),
    ("OPEN_AI", "COMPLETION"): ("openAI", "GPT4O_CHAT_128K"),
    ("OPEN_AI", "PREPARATION"): ("openAI", "GPT4O_128K"),
    ("OPEN_AI", "EXTRACTION"): ("openAI", "GPT4O_128K"),
    ("GOOGLE", "COMPLETION"): ("google", "GEMINI_2_0_FLASH"),
    ("GOOGLE", "PREPARATION"): ("google", "GEMINI_2_5_PRO_PREVIEW"),
    ("GOOGLE", "EXTRACTION"): ("google", "GEMINI_2_0_FLASH"),
}

_SPECIFICATION_NAMES = {
    "COMPLETION": "MCP Default Specification: Completion",
    "PREPARATION": "MCP Default Specification: Preparation",
    "EXTRACTION": "MCP Default Specification: Extraction",
}

DEFAULT_WORKFLOW_NAME = "MCP Default Workflow"


def build_specification(service: str, spec_type: SpecificationTypes) -> dict[str, Any]:
    """SpecificationInput for one of the default specifications."""
    key = (service, spec_type.value)
    if key not in _MODELS:
        raise ValidationError(f"Unsupported model service type [{service}].", field="modelServiceType")
    section, model = _MODELS[key]
    model_props: dict[str, Any] = {"model": model}
    if spec_type is SpecificationTypes.PREPARATION and service == ModelServiceTypes.ANTHROPIC.value:
        model_props["enableThinking"] = True
    spec: dict[str, Any] = {
        "name": _SPECIFICATION_NAMES[spec_type.value],
        "type": spec_type.value,
        "serviceType": service,
        section: model_props,
    }
    if spec_type is SpecificationTypes.COMPLETION:
        spec.update({
            "searchType": "HYBRID",
            "strategy": {"embedCitations": True},
            "promptStrategy": {"type": "OPTIMIZE_SEARCH"},
            "retrievalStrategy": {"type": "SECTION"},
            "rerankingStrategy": {"serviceType": "COHERE"},
        })
    return spec


def build_workflow(preparation_id: str | None, extraction_id: str | None) -> dict[str, Any]:
    workflow: dict[str, Any] = {"name": DEFAULT_WORKFLOW_NAME}
    if preparation_id is not None:
        workflow["preparation"] = {"jobs": [{
            "connector": {
                "type": "MODEL_DOCUMENT",
                "modelDocument": {"specification": {"id": preparation_id}},
            },
        }]}
    if extraction_id is not None:
        workflow["extraction"] = {"jobs": [
            {"connector": {"type": "MODEL_TEXT", "modelText": {"specification": {"id": extraction_id}}}},
            {"connector": {"type": "MODEL_IMAGE", "modelImage": {"specification": {"id": extraction_id}}}},
        ]}
    return workflow


class ConfigureProjectTool(GraphlitTool):
    name = "configureProject"
    description = (
        "Configures the default content workflow and conversation specification for the Graphlit project. "
        "Only needed to change the default LLM, enable vision-LLM document preparation or knowledge-graph "
        "entity extraction. Accepts the model service (ANTHROPIC, OPEN_AI, GOOGLE) and which default "
        "specifications to configure. Returns the project identifier."
    )
    parameters = obj({
        "modelServiceType": choice(
            ModelServiceTypes, "LLM service for conversations, preparation and extraction. Defaults to ANTHROPIC.",
            default=ModelServiceTypes.ANTHROPIC.value,
        ),
        "configureConversationSpecification": boolean(
            "Whether to configure the default specification for LLM conversations. Defaults to false."
        ),
        "configurePreparationSpecification": boolean(
            "Whether to configure document and web page preparation using a vision LLM. Defaults to false."
        ),
        "configureExtractionSpecification": boolean(
            "Whether to configure entity extraction into the knowledge graph using an LLM. Defaults to false."
        ),
    })

    async def run(
        self,
        model_service_type: str = ModelServiceTypes.ANTHROPIC.value,
        configure_conversation_specification: bool = False,
        configure_preparation_specification: bool = False,
        configure_extraction_specification: bool = False,
        **kwargs: Any,
    ) -> ToolResult:
        if model_service_type not in {m.value for m in ModelServiceTypes}:
            raise ValidationError(f"Unsupported model service type [{model_service_type}].", field="modelServiceType")

        ids: dict[SpecificationTypes, str | None] = {}
        for spec_type, enabled in (
            (SpecificationTypes.COMPLETION, configure_conversation_specification),
            (SpecificationTypes.PREPARATION, configure_preparation_specification),
            (SpecificationTypes.EXTRACTION, configure_extraction_specification),
        ):
            if enabled:
                response = await self.client.upsert_specification(build_specification(model_service_type, spec_type))
                ids[spec_type] = (response or {}).get("id")

        workflow = await self.client.upsert_workflow(
            build_workflow(ids.get(SpecificationTypes.PREPARATION), ids.get(SpecificationTypes.EXTRACTION))
        )
        workflow_id = (workflow or {}).get("id")

        project: dict[str, Any] = {}
        completion_id = ids.get(SpecificationTypes.COMPLETION)
        if completion_id is not None:
            project["specification"] = {"id": completion_id}
        if workflow_id is not None:
            project["workflow"] = {"id": workflow_id}
        response = await self.client.update_project(project)
        return ToolResult.json({"id": (response or {}).get("id")})


class QueryProjectUsageTool(GraphlitTool):
    name = "queryProjectUsage"
    description = (
        "Queries project usage records, the billable audit log of all Graphlit API operations. "
        "Record 'name' describes the operation (e.g. 'Prompt completion', 'Text embedding', 'GraphQL', "
        "'Entity Event'); 'metric' is the unit captured (BYTES, TOKENS, UNITS, REQUESTS); 'credits' is what "
        "the operation was charged; 'promptTokens', 'completionTokens' and 'tokens' count LLM tokens. "
        "Accepts an optional recency window. Returns the list of usage records."
    )
    parameters = obj({
        "inLast": string(
            "Recency window for usage records, ISO 8601 duration, e.g. 'PT1H', 'P1D', 'P7D'. Defaults to PT1H.",
            default="PT1H",
        ),
    })

    async def run(self, in_last: str = "PT1H", **kwargs: Any) -> ToolResult:
        start_date = recency_cutoff(in_last, field="inLast")

        async def fetch_page(offset: int, limit: int) -> list[Any]:
            return await self.client.query_project_usage(start_date, in_last, offset=offset, limit=limit)

        usage = await collect_pages(
            fetch_page,
            limit=self.settings.usage_page_limit,
            transform=clean_usage_record,
            max_pages=self.settings.usage_max_pages,
            label=self.name,
        )
        return ToolResult.json(usage)


class AskGraphlitTool(GraphlitTool):
    name = "askGraphlit"
    description = (
        "Ask questions about using the Graphlit Platform, or about the Graphlit API and SDKs. "
        "Useful for generating code against the Graphlit SDKs. Returns the answer as Markdown text."
    )
    parameters = obj({"prompt": string("Question about the Graphlit platform, API or SDKs.")}, required=["prompt"])

    async def run(self, prompt: str, **kwargs: Any) -> ToolResult:
        response = await self.client.ask_graphlit(prompt)
        return ToolResult.json((response or {}).get("message"))
