from __future__ import annotations

"""Per-graph policies."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

__all__ = ["GraphConfig"]


class GraphConfig(BaseModel):  # noqa: D101 – fields are self-documenting
    model_config = ConfigDict(frozen=True, extra="forbid")

    # "ignore": add_node on an existing name returns that node untouched
    # "raise":  add_node on an existing name raises DuplicateNode
    duplicate_nodes: Literal["ignore", "raise"] = "ignore"

    # add_edge creates unknown endpoints by name
    implicit_nodes: bool = True

    # rejected cycle-forming edges go to WARNING, otherwise DEBUG
    log_rejections: bool = True
