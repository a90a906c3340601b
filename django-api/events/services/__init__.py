from events.services.event_service import EventService, parse_event_id, parse_event_status

__all__ = ["EventService", "parse_event_id", "parse_event_status"]
