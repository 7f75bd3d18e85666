"""Map an event to the call-graph node pairs it touches."""

from ..models import Event, HighlightPair


def highlight_pairs(event: Event) -> list[HighlightPair]:
    """Pairs of graph nodes to highlight for a single event.

    Function calls win over function responses; an event with neither
    highlights its author only.
    """
    calls = event.function_calls()
    if calls:
        return [(call.name, event.author) for call in calls if call.name]

    responses = event.function_responses()
    if responses:
        return [(resp.name, event.author) for resp in responses if resp.name]

    return [(event.author, event.author)]
