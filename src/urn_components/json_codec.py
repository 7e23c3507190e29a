"""JSON interop for URNs

A URN travels through JSON documents as its string form:

    >>> doc = loads('{"urn": "urn:example:abc"}', keys=["urn"])
    >>> doc["urn"].assigned_name
    'urn:example:abc'
    >>> dumps({"urn": doc["urn"]})
    '{"urn": "urn:example:abc"}'
"""

import json
from typing import Any, Callable, Dict, Iterable

from .rqf import RQF
from .urn_components import URNComponents


class URNComponentsEncoder(json.JSONEncoder):
    """JSON encoder that writes URNs and RQF trailers as strings"""

    def default(self, o: Any) -> Any:
        if isinstance(o, URNComponents):
            return o.to_json_value()
        if isinstance(o, RQF):
            return o.to_string()
        return super().default(o)


def urn_object_hook(*keys: str) -> Callable[[Dict[str, Any]], Dict[str, Any]]:
    """Build an object_hook that parses the values of the given keys as URNs

    Parsing errors propagate out of json.loads unchanged.
    """
    wanted = frozenset(keys)

    def hook(obj: Dict[str, Any]) -> Dict[str, Any]:
        for key in wanted.intersection(obj):
            obj[key] = URNComponents.from_json_value(obj[key])
        return obj

    return hook


def dumps(obj: Any, **kwargs: Any) -> str:
    """json.dumps with URN support"""
    kwargs.setdefault("cls", URNComponentsEncoder)
    return json.dumps(obj, **kwargs)


def loads(s: str, keys: Iterable[str] = (), **kwargs: Any) -> Any:
    """json.loads that parses the string values of `keys` into URNs"""
    keys = tuple(keys)
    if keys:
        kwargs.setdefault("object_hook", urn_object_hook(*keys))
    return json.loads(s, **kwargs)
