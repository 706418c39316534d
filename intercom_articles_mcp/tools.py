"""Tool catalog: one declarative entry per MCP tool, plus its handler.

Handlers receive an already-validated input model and make exactly one
Intercom API call.
"""

from dataclasses import dataclass
from functools import cached_property
from typing import Any, Awaitable, Callable, Dict, List, Tuple, Type
from urllib.parse import quote

from pydantic import BaseModel

from .client import call_intercom_api
from .errors import EmptyUpdateError, UnknownToolError
from .models import (
    CreateArticleInput,
    DeleteCollectionInput,
    GetArticleInput,
    GetCollectionInput,
    ListArticlesInput,
    ListCollectionsInput,
    UpdateArticleInput,
    UpdateCollectionInput,
)


def _path_id(resource_id: str) -> str:
    return quote(resource_id, safe="")


# ─── Article Handlers ────────────────────────────────────────────────────────


async def get_article(params: GetArticleInput) -> Any:
    return await call_intercom_api(f"/articles/{_path_id(params.id)}")


async def list_articles(params: ListArticlesInput) -> Any:
    return await call_intercom_api(
        "/articles", params={"page": params.page, "per_page": params.per_page}
    )


async def create_article(params: CreateArticleInput) -> Any:
    # Falsy optionals were dropped before validation, so "set" means "truthy".
    payload = params.model_dump(exclude_unset=True)
    return await call_intercom_api("/articles", "POST", payload)


async def update_article(params: UpdateArticleInput) -> Any:
    """Partial update: only truthy fields are sent."""
    payload = params.model_dump(exclude_unset=True, exclude={"id"})
    if not payload:
        raise EmptyUpdateError()
    return await call_intercom_api(f"/articles/{_path_id(params.id)}", "PUT", payload)


# ─── Collection Handlers ─────────────────────────────────────────────────────


async def list_collections(params: ListCollectionsInput) -> Any:
    return await call_intercom_api(
        "/help_center/collections",
        params={"page": params.page, "per_page": params.per_page},
    )


async def get_collection(params: GetCollectionInput) -> Any:
    return await call_intercom_api(f"/help_center/collections/{_path_id(params.id)}")


async def update_collection(params: UpdateCollectionInput) -> Any:
    """Partial update: every field the caller sent is forwarded, even "" or null.

    ``translated_content`` is the exception and is dropped when null.
    """
    payload = params.model_dump(exclude_unset=True, exclude={"id"})
    if payload.get("translated_content") is None:
        payload.pop("translated_content", None)
    if not payload:
        raise EmptyUpdateError()
    return await call_intercom_api(
        f"/help_center/collections/{_path_id(params.id)}", "PUT", payload
    )


async def delete_collection(params: DeleteCollectionInput) -> Any:
    result = await call_intercom_api(
        f"/help_center/collections/{_path_id(params.id)}", "DELETE"
    )
    response: Dict[str, Any] = {
        "success": True,
        "message": f"Collection {params.id} has been deleted successfully",
    }
    if isinstance(result, dict):
        response.update(result)
    return response


# ─── Catalog ─────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class ToolSpec:
    """A tool as advertised to MCP callers and dispatched by name.

    ``skip_falsy`` marks tools where an empty string, zero or null argument
    is treated as not provided at all.
    """

    name: str
    title: str
    description: str
    input_model: Type[BaseModel]
    handler: Callable[[Any], Awaitable[Any]]
    read_only: bool = True
    destructive: bool = False
    idempotent: bool = True
    skip_falsy: bool = False

    @cached_property
    def input_schema(self) -> Dict[str, Any]:
        return self.input_model.model_json_schema()

    @property
    def required(self) -> Tuple[str, ...]:
        return tuple(self.input_schema.get("required", ()))


TOOLS: Tuple[ToolSpec, ...] = (
    ToolSpec(
        name="get_article",
        title="Get Intercom Article",
        description=(
            "Get a single Intercom article by ID. Returns full article details "
            "including title, body, author, and state."
        ),
        input_model=GetArticleInput,
        handler=get_article,
    ),
    ToolSpec(
        name="list_articles",
        title="List Intercom Articles",
        description=(
            "List Intercom articles with pagination. Returns a list of articles "
            "with basic information."
        ),
        input_model=ListArticlesInput,
        handler=list_articles,
    ),
    ToolSpec(
        name="create_article",
        title="Create Intercom Article",
        description=(
            "Create a new Intercom Help Center article. Supports multilingual "
            "content and draft/published states."
        ),
        input_model=CreateArticleInput,
        handler=create_article,
        read_only=False,
        idempotent=False,
        skip_falsy=True,
    ),
    ToolSpec(
        name="update_article",
        title="Update Intercom Article",
        description=(
            "Update an existing Intercom Help Center article. Supports partial "
            "updates and multilingual content."
        ),
        input_model=UpdateArticleInput,
        handler=update_article,
        read_only=False,
        skip_falsy=True,
    ),
    ToolSpec(
        name="list_collections",
        title="List Help Center Collections",
        description=(
            "List all Intercom Help Center collections. Collections are top-level "
            "categories that contain sections and articles."
        ),
        input_model=ListCollectionsInput,
        handler=list_collections,
    ),
    ToolSpec(
        name="get_collection",
        title="Get Help Center Collection",
        description=(
            "Get a single Intercom Help Center collection by ID. Returns full "
            "collection details including name, description, and metadata."
        ),
        input_model=GetCollectionInput,
        handler=get_collection,
    ),
    ToolSpec(
        name="update_collection",
        title="Update Help Center Collection",
        description=(
            "Update an existing Intercom Help Center collection. Supports updating "
            "name, description, and multilingual translations."
        ),
        input_model=UpdateCollectionInput,
        handler=update_collection,
        read_only=False,
    ),
    ToolSpec(
        name="delete_collection",
        title="Delete Help Center Collection",
        description=(
            "Delete an Intercom Help Center collection. WARNING: This action cannot "
            "be undone. The collection and all its contents will be permanently removed."
        ),
        input_model=DeleteCollectionInput,
        handler=delete_collection,
        read_only=False,
        destructive=True,
    ),
)

_TOOLS_BY_NAME: Dict[str, ToolSpec] = {spec.name: spec for spec in TOOLS}


def list_tools() -> List[ToolSpec]:
    return list(TOOLS)


def get_tool(name: str) -> ToolSpec:
    try:
        return _TOOLS_BY_NAME[name]
    except KeyError:
        raise UnknownToolError(name) from None
