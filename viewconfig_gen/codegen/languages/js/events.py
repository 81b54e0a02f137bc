"""
Event name normalization and bubbling/direct classification.

The normalized names must match the top-level event names the native
event dispatcher produces, so the rules here are fixed.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ...core.errors import UnknownEventBubblingType
from ...core.schema import Event, BubblingType
from .imports import ImportSet, CONDITIONALLY_IGNORED_EVENT_HANDLERS
from .naming import capitalize_first
from .nodes import (
    Literal,
    Identifier,
    CallExpression,
    ObjectExpression,
    Property,
    SpreadElement,
)


def normalize_event_name(name: str) -> str:
    """
    Normalize a raw event name to its top-level form.

    ``onPress`` -> ``topPress``, ``press`` -> ``topPress``,
    ``topPress`` -> ``topPress``.
    """
    if name.startswith("on"):
        return "top" + name[2:]
    elif not name.startswith("top"):
        return "top" + capitalize_first(name)

    return name


@dataclass(frozen=True)
class EventRegistration:
    """Where an event is registered and under which names."""

    bucket: BubblingType
    key: str
    registration_names: Tuple[str, ...]

    def to_property(self) -> Property:
        """Render as an entry of bubblingEventTypes/directEventTypes."""
        if self.bucket is BubblingType.BUBBLE:
            captured, bubbled = self.registration_names
            payload = Property(
                "phasedRegistrationNames",
                ObjectExpression(
                    [
                        Property("captured", Literal(captured)),
                        Property("bubbled", Literal(bubbled)),
                    ]
                ),
            )
        else:
            (registration_name,) = self.registration_names
            payload = Property("registrationName", Literal(registration_name))
        return Property(self.key, ObjectExpression([payload]))


def classify_event(event: Event) -> EventRegistration:
    """
    Classify an event as bubbling or direct.

    The deprecated top-level name, when present, replaces the normalized
    key; the raw name inside the registration is never substituted.

    Raises:
        UnknownEventBubblingType: If bubblingType is not bubble/direct
    """
    key = event.paper_top_level_name_deprecated or normalize_event_name(event.name)

    match event.bubbling_type:
        case BubblingType.BUBBLE:
            return EventRegistration(
                BubblingType.BUBBLE, key, (f"{event.name}Capture", event.name)
            )
        case BubblingType.DIRECT:
            return EventRegistration(BubblingType.DIRECT, key, (event.name,))
        case _:
            raise UnknownEventBubblingType(event.name, event.bubbling_type)


def build_event_types(
    events: Sequence[Event],
) -> Tuple[Optional[ObjectExpression], Optional[ObjectExpression]]:
    """
    Build the bubblingEventTypes and directEventTypes maps.

    Returns:
        (bubbling, direct); either is None when it would be empty
    """
    bubbling: List[Property] = []
    direct: List[Property] = []

    for event in events:
        registration = classify_event(event)
        if registration.bucket is BubblingType.BUBBLE:
            bubbling.append(registration.to_property())
        else:
            direct.append(registration.to_property())

    return (
        ObjectExpression(bubbling) if bubbling else None,
        ObjectExpression(direct) if direct else None,
    )


def build_event_valid_attributes(
    events: Sequence[Event], imports: ImportSet
) -> SpreadElement:
    """
    Build the spread of event handler attributes for validAttributes.

    One ``true`` entry per raw event name, wrapped in the host filter so
    handlers can be dropped at runtime.
    """
    filter_name = imports.add(CONDITIONALLY_IGNORED_EVENT_HANDLERS)
    attributes = ObjectExpression(
        [Property(event.name, Literal(True)) for event in events]
    )
    return SpreadElement(CallExpression(Identifier(filter_name), [attributes]))
