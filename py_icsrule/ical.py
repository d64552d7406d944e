"""Bridge between the codec's text values and icalendar components.

The event store keeps RRULE and TRIGGER as plain text. This module reads
those values out of parsed iCalendar data and writes edited values back, so
an imported .ics file can go through the same parse/validate/classify path
as text coming from the API.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta

from icalendar import Alarm, Component, vRecur

from .alarm.trigger import AlarmTrigger, AlarmWhen, TriggerUnit, decode_trigger
from .config import DEFAULT_CONFIG, CodecConfig
from .internal.icsdate import encode_datetime
from .rrule.generator import generate
from .rrule.parser import parse
from .rrule.rrule import RecurrenceConfig
from .rrule.validator import validate
from .validation import ValidationResult, ViolationCode

logger = logging.getLogger("py_icsrule")

_UNIT_DELTAS = {
    TriggerUnit.MINUTES: timedelta(minutes=1),
    TriggerUnit.HOURS: timedelta(hours=1),
    TriggerUnit.DAYS: timedelta(days=1),
}


def trigger_to_timedelta(trigger: AlarmTrigger) -> timedelta:
    """Convert a relative trigger to a signed offset from the event start.

    Raises:
        ValueError: If the trigger is absolute (AT)
    """
    if trigger.when == AlarmWhen.AT:
        raise ValueError("absolute trigger has no offset")
    delta = _UNIT_DELTAS[trigger.unit] * trigger.value
    return -delta if trigger.when == AlarmWhen.BEFORE else delta


class ICalendarBridge:
    """Reads and writes recurrence and alarm values on icalendar components.

    Works on any component with the relevant properties: VEVENT/VTODO for
    RRULE, VALARM for TRIGGER.
    """

    def __init__(self, config: CodecConfig | None = None) -> None:
        """Initialize the bridge.

        Args:
            config: Codec configuration (uses default if None)
        """
        self.config = config or DEFAULT_CONFIG

    def rrule_text(self, component: Component) -> str:
        """Get the RRULE of a component as text.

        Only the first RRULE is returned if the component carries several.

        Returns:
            RRULE value (e.g., "FREQ=WEEKLY;BYDAY=MO,WE"), or "" if absent
        """
        rrule = component.get("RRULE")
        if rrule is None:
            return ""
        if isinstance(rrule, list):
            if not rrule:
                return ""
            rrule = rrule[0]
        text: str = rrule.to_ical().decode("utf-8")
        return text

    def recurrence(self, component: Component) -> RecurrenceConfig:
        """Get the editable recurrence of a component.

        Returns:
            Parsed configuration, or the default (no recurrence) when the
            component has no RRULE
        """
        return parse(self.rrule_text(component), self.config) or RecurrenceConfig.none()

    def set_rrule(self, component: Component, text: str) -> ValidationResult:
        """Replace the RRULE of a component.

        Empty text removes the RRULE. Text that is structurally invalid, or
        that icalendar cannot read (e.g. "BYDAY=XX"), leaves the component
        untouched.

        Args:
            component: VEVENT or VTODO to update
            text: New RRULE value

        Returns:
            Validation result of ``text``
        """
        result = validate(text)
        if not result.valid:
            logger.debug(f"Not setting RRULE: {result.reason}")
            return result

        recur = None
        if text and text.strip():
            try:
                recur = vRecur.from_ical(text.strip())
            except ValueError as e:
                return ValidationResult.invalid(ViolationCode.MALFORMED_RRULE, str(e))

        if "RRULE" in component:
            del component["RRULE"]
        if recur is not None:
            component.add("rrule", recur)
        return result

    def set_recurrence(self, component: Component, config: RecurrenceConfig) -> ValidationResult:
        """Write an edited configuration back to a component."""
        return self.set_rrule(component, generate(config))

    def trigger_text(self, alarm: Component) -> str:
        """Get the TRIGGER of a VALARM as text.

        Returns:
            Duration (e.g., "-PT15M") for relative triggers, UTC
            date-time (e.g., "20250115T100000Z") for absolute ones, or ""
            if the alarm has no trigger
        """
        trigger = alarm.get("TRIGGER")
        if trigger is None:
            return ""

        value = trigger.dt
        if isinstance(value, datetime):
            return encode_datetime(value)
        text: str = trigger.to_ical().decode("utf-8")
        return text

    def alarm_triggers(self, component: Component) -> list[AlarmTrigger]:
        """Get editable triggers for every VALARM of a component.

        Triggers that cannot be read are replaced by the default trigger
        (15 minutes before) so that every alarm has an editable value.
        """
        triggers = []
        for alarm in component.walk("VALARM"):
            text = self.trigger_text(alarm)
            trigger = decode_trigger(text)
            if trigger is None:
                logger.debug(f"Unreadable alarm trigger {text!r}, using default")
                trigger = AlarmTrigger.default()
            triggers.append(trigger)
        return triggers

    def build_alarm(
        self,
        trigger: AlarmTrigger,
        description: str = "",
        start: datetime | None = None,
    ) -> Alarm:
        """Build a DISPLAY alarm.

        Args:
            trigger: Alarm trigger
            description: Text shown when the alarm fires (default: "Reminder")
            start: Event start; required for AT triggers, which become an
                   absolute UTC trigger at that time

        Returns:
            icalendar Alarm component

        Raises:
            ValueError: If ``trigger`` is AT and no ``start`` is given
        """
        alarm = Alarm()
        alarm.add("action", "DISPLAY")
        alarm.add("description", description or "Reminder")

        if trigger.when == AlarmWhen.AT:
            if start is None:
                raise ValueError("absolute alarm trigger requires the event start")
            if start.tzinfo is None:
                start = start.replace(tzinfo=UTC)
            alarm.add(
                "trigger",
                start.astimezone(UTC).replace(microsecond=0),
                parameters={"VALUE": "DATE-TIME"},
            )
        else:
            alarm.add("trigger", trigger_to_timedelta(trigger))

        return alarm
