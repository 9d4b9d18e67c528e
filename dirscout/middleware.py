"""
ListDir Middleware - bounded directory listing tool.

Tools:
- list_dir: depth-limited, paginated listing with 1-indexed entry numbers
  and simple type labels

Design:
- Path must be absolute; optional workspace restriction from config
- Output lines: ``E<n>: [<kind>] <relative path>``, sorted by path
- offset / limit paginate; ordinals stay absolute across pages
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Any

from langchain.agents.middleware.types import (
    AgentMiddleware,
    ModelRequest,
    ModelResponse,
    ToolCallRequest,
)
from langchain_core.messages import ToolMessage

from dirscout.config.loader import configure_logging, load_config
from dirscout.config.schema import ListDirConfig
from dirscout.interfaces.filesystem import DirectoryBackend
from dirscout.list_dir.errors import ListDirError
from dirscout.list_dir.service import handle_list_dir

logger = logging.getLogger(__name__)


class ListDirMiddleware(AgentMiddleware):
    """Middleware providing the list_dir tool."""

    TOOL_LIST_DIR = "list_dir"

    def __init__(
        self,
        config: ListDirConfig | None = None,
        *,
        project_root: str | Path | None = None,
        backend: DirectoryBackend | None = None,
    ):
        """Initialize list_dir middleware.

        Args:
            config: Explicit tool config; when omitted, loaded from the
                defaults, user and project list_dir.json layers
            project_root: Directory whose .dirscout/list_dir.json is the project layer
            backend: DirectoryBackend (default: LocalBackend)
        """
        super().__init__()
        if config is None:
            settings = load_config(project_root)
            configure_logging(settings)
            config = settings.list_dir
        self.config = config

        if backend is None:
            from dirscout.filesystem.local_backend import LocalBackend

            backend = LocalBackend()
        self.backend = backend

        logger.info(
            "ListDirMiddleware initialized (backend: %s, workspace: %s, enabled: %s)",
            type(self.backend).__name__,
            self.config.workspace_root or "<unrestricted>",
            self.config.enabled,
        )

    # ------------------------------------------------------------------
    # Tool schema
    # ------------------------------------------------------------------

    def _get_tool_schemas(self) -> list[dict]:
        if not self.config.enabled:
            return []
        return [
            {
                "type": "function",
                "function": {
                    "name": self.TOOL_LIST_DIR,
                    "description": (
                        "Lists entries in a local directory with 1-indexed entry numbers and simple type labels. "
                        "Recurses up to `depth` levels; paths are relative to dir_path and sorted."
                    ),
                    "parameters": {
                        "type": "object",
                        "properties": {
                            "dir_path": {
                                "type": "string",
                                "description": "Absolute path to the directory to list.",
                            },
                            "offset": {
                                "type": "integer",
                                "description": "The entry number to start listing from. Must be 1 or greater.",
                            },
                            "limit": {
                                "type": "integer",
                                "description": f"The maximum number of entries to return. Default: {self.config.default_limit}",
                            },
                            "depth": {
                                "type": "integer",
                                "description": (
                                    "The maximum directory depth to traverse. Must be 1 or greater. "
                                    f"Default: {self.config.default_depth}"
                                ),
                            },
                        },
                        "required": ["dir_path"],
                    },
                },
            },
        ]

    # ------------------------------------------------------------------
    # Tool dispatch
    # ------------------------------------------------------------------

    def _handles(self, tool_call: dict) -> bool:
        return self.config.enabled and tool_call.get("name") == self.TOOL_LIST_DIR

    async def _ahandle_tool(self, tool_call: dict) -> ToolMessage | None:
        """Dispatch a tool call. Returns ToolMessage if handled, else None."""
        if not self._handles(tool_call):
            return None

        call_id = tool_call.get("id", "")
        try:
            content = await handle_list_dir(
                tool_call.get("args", {}),
                config=self.config,
                backend=self.backend,
            )
        except ListDirError as e:
            logger.warning("list_dir call %s failed: %s", call_id, e)
            return ToolMessage(content=str(e), tool_call_id=call_id, name=self.TOOL_LIST_DIR, status="error")

        return ToolMessage(content=content, tool_call_id=call_id, name=self.TOOL_LIST_DIR)

    # ------------------------------------------------------------------
    # Middleware interface
    # ------------------------------------------------------------------

    def wrap_model_call(
        self,
        request: ModelRequest,
        handler: Callable[[ModelRequest], ModelResponse],
    ) -> ModelResponse:
        tools = list(request.tools or [])
        tools.extend(self._get_tool_schemas())
        return handler(request.override(tools=tools))

    async def awrap_model_call(
        self,
        request: ModelRequest,
        handler: Callable[[ModelRequest], Awaitable[ModelResponse]],
    ) -> ModelResponse:
        tools = list(request.tools or [])
        tools.extend(self._get_tool_schemas())
        return await handler(request.override(tools=tools))

    def wrap_tool_call(
        self,
        request: ToolCallRequest,
        handler: Callable[[ToolCallRequest], Any],
    ) -> Any:
        if not self._handles(request.tool_call):
            return handler(request)
        # sync agents run outside an event loop; drive the traversal to completion here
        return asyncio.run(self._ahandle_tool(request.tool_call))

    async def awrap_tool_call(
        self,
        request: ToolCallRequest,
        handler: Callable[[ToolCallRequest], Awaitable[Any]],
    ) -> Any:
        msg = await self._ahandle_tool(request.tool_call)
        if msg is not None:
            return msg
        return await handler(request)


__all__ = ["ListDirMiddleware"]
