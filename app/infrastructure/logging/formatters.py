"""structlog processors used by the dictionary service."""

from typing import Any

EventDict = dict[str, Any]


def add_service_info(service: str, version: str = "unknown"):
    """Stamp every entry with the service name and deployed version (git SHA)."""

    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("service", service)
        event_dict.setdefault("version", version)
        return event_dict

    return processor


def truncate_long_strings(max_length: int = 500):
    """Cut string values longer than max_length, noting the original size."""

    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        for key, value in event_dict.items():
            if isinstance(value, str) and len(value) > max_length:
                event_dict[key] = f"{value[:max_length]}...[{len(value)} chars]"
        return event_dict

    return processor
