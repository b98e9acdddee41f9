"""Pydantic schemas for API request/response validation.

This module defines the data models used for validating API requests
and serializing responses.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ClickInput(BaseModel):
    """A click on one of the item elements."""

    channel: Literal["click"]
    element_id: str = Field(..., min_length=1)


class WheelInput(BaseModel):
    """A mouse-wheel or trackpad scroll over the carousel."""

    channel: Literal["wheel"]
    delta_x: float = 0.0
    delta_y: float = 0.0


class KeyInput(BaseModel):
    """A key press anywhere on the page."""

    channel: Literal["key"]
    key: str = Field(..., min_length=1, max_length=32)


class TouchInput(BaseModel):
    """One phase of a single-finger touch gesture."""

    channel: Literal["touch"]
    phase: Literal["start", "move", "end"]
    x: float | None = None
    y: float | None = None

    @model_validator(mode="after")
    def require_coordinates(self) -> "TouchInput":
        if self.phase != "end" and (self.x is None or self.y is None):
            raise ValueError(f"touch {self.phase} requires x and y")
        return self


InputEvent = Annotated[
    ClickInput | WheelInput | KeyInput | TouchInput,
    Field(discriminator="channel"),
]


class InputRequest(BaseModel):
    """Schema for delivering one input event to a session's carousel."""

    event: InputEvent

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"event": {"channel": "wheel", "delta_x": 0, "delta_y": 10}}
        }
    )


class ItemSummary(BaseModel):
    """An item as linked from a page."""

    id: str
    label: str
    url: str


class ItemView(BaseModel):
    """An item element as the presentation layer sees it."""

    id: str
    label: str = Field(..., description="The item's own label")
    text: str = Field(..., description="Currently displayed text")
    classes: list[str]
    role: str | None = None


class CarouselView(BaseModel):
    """Schema for the state of a session's carousel."""

    session_id: str
    active_index: int
    active_item: str
    state: str = Field(..., description="'idle' or 'transitioning'")
    pointer_events: bool
    items: list[ItemView]

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "session_id": "tab-1",
                "active_index": 0,
                "active_item": "forest",
                "state": "idle",
                "pointer_events": True,
                "items": [
                    {
                        "id": "forest",
                        "label": "Forest",
                        "text": "",
                        "classes": ["active"],
                        "role": "active",
                    }
                ],
            }
        }
    )


class InputResponse(BaseModel):
    """Schema for the outcome of an input event."""

    signal: str | None = None
    transitioned: bool = False
    navigate_to: str | None = None
    carousel: CarouselView


class PageResponse(BaseModel):
    """Schema for a biome page visit."""

    item: ItemSummary
    prev: ItemSummary
    next: ItemSummary


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str
