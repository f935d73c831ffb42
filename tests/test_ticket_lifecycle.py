"""Tests for the travel ticket lifecycle."""

import asyncio
from datetime import date, datetime, time, timedelta

import pytest
from fakes import FakeClock, FakeTickTimer

from travel_checkin.adapters.timers import AsyncioTickTimer
from travel_checkin.application.services import TicketLifecycle, format_countdown
from travel_checkin.domain.errors import InvalidInputError
from travel_checkin.domain.models import TicketState

NOW = datetime(2024, 1, 1, 13, 0, 0)


@pytest.fixture
def timer() -> FakeTickTimer:
    return FakeTickTimer()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(NOW)


@pytest.fixture
def lifecycle(timer: FakeTickTimer, clock: FakeClock) -> TicketLifecycle:
    return TicketLifecycle(timer, clock)


class TestFormatCountdown:
    """Tests for countdown formatting."""

    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [
            (0, "00:00:00"),
            (59, "00:00:59"),
            (3600, "01:00:00"),
            (3661, "01:01:01"),
            (86399, "23:59:59"),
            (-5, "00:00:00"),
        ],
    )
    def test_format(self, seconds: int, expected: str) -> None:
        """Given a number of seconds, when formatting, then HH:MM:SS is zero padded."""
        assert format_countdown(seconds) == expected


class TestOpenTicket:
    """Tests for opening tickets."""

    def test_one_hour_before_return(self, lifecycle: TicketLifecycle) -> None:
        """Given 13:00 now and return at 14:00 today, then 3600 seconds and 01:00:00."""
        ticket = lifecycle.open_ticket("Patratu Valley", "14:00", date(2024, 1, 1))

        status = lifecycle.status()
        assert lifecycle.state is TicketState.ACTIVE
        assert ticket.return_time == time(14, 0)
        assert ticket.created_at == NOW
        assert lifecycle.time_remaining == 3600
        assert status is not None
        assert status.display == "01:00:00"
        assert status.expired is False
        assert status.label == "Time Remaining: 01:00:00"

    def test_accepts_strings_and_defaults_date_to_today(self, lifecycle: TicketLifecycle) -> None:
        """Given an ISO date string or none, when opening, then the date is parsed or today."""
        ticket = lifecycle.open_ticket("Hundru Falls", "15:30", "2024-01-02", transport=" Bus ")
        assert ticket.travel_date == date(2024, 1, 2)
        assert ticket.transport == "Bus"
        assert lifecycle.time_remaining == int(timedelta(hours=26, minutes=30).total_seconds())

        ticket = lifecycle.open_ticket("Hundru Falls", time(13, 0, 30))
        assert ticket.travel_date == date(2024, 1, 1)
        assert ticket.transport is None
        assert lifecycle.time_remaining == 30

    def test_return_time_in_the_past_is_floored_at_zero(self, lifecycle: TicketLifecycle) -> None:
        """Given a return time already passed, when opening, then remaining time is zero."""
        lifecycle.open_ticket("Market", "12:00", "2024-01-01")

        status = lifecycle.status()
        assert lifecycle.time_remaining == 0
        assert status is not None
        assert status.expired is True
        assert status.label == "Time Expired!"
        assert lifecycle.state is TicketState.ACTIVE

    @pytest.mark.parametrize(
        ("destination", "return_time"),
        [("", "14:00"), ("   ", "14:00"), ("Market", ""), ("Market", None), ("Market", "2pm")],
    )
    def test_invalid_input_is_rejected_without_side_effects(
        self,
        lifecycle: TicketLifecycle,
        timer: FakeTickTimer,
        destination: str,
        return_time: str | None,
    ) -> None:
        """Given a missing destination or return time, then InvalidInputError and no change."""
        original = lifecycle.open_ticket("Original", "14:00")
        starts, cancels = timer.start_count, timer.cancel_count

        with pytest.raises(InvalidInputError):
            lifecycle.open_ticket(destination, return_time)

        assert lifecycle.ticket == original
        assert (timer.start_count, timer.cancel_count) == (starts, cancels)
        assert timer.live_schedules == 1

    def test_invalid_date_is_rejected(self, lifecycle: TicketLifecycle) -> None:
        """Given a malformed date, when opening, then InvalidInputError and still no ticket."""
        with pytest.raises(InvalidInputError):
            lifecycle.open_ticket("Market", "14:00", "01/01/2024")

        assert lifecycle.state is TicketState.NO_TICKET


class TestCountdown:
    """Tests for the ticking countdown."""

    def test_each_tick_decrements_one_second(
        self, lifecycle: TicketLifecycle, timer: FakeTickTimer
    ) -> None:
        """Given an open ticket, when the timer fires 5 times, then 5 seconds are removed."""
        lifecycle.open_ticket("Market", "14:00", "2024-01-01")

        timer.fire(5)

        assert lifecycle.time_remaining == 3595

    def test_countdown_floors_at_zero_and_stays_active(
        self, lifecycle: TicketLifecycle, timer: FakeTickTimer
    ) -> None:
        """Given 3 seconds left, when firing 10 times, then zero, expired and still active."""
        lifecycle.open_ticket("Market", time(13, 0, 3), "2024-01-01")

        timer.fire(10)

        status = lifecycle.status()
        assert lifecycle.time_remaining == 0
        assert status is not None and status.expired
        assert lifecycle.state is TicketState.ACTIVE
        assert timer.is_running

    def test_reopening_cancels_previous_timer(
        self, lifecycle: TicketLifecycle, timer: FakeTickTimer
    ) -> None:
        """Given an active ticket, when opening another, then only one schedule is live."""
        lifecycle.open_ticket("First", "14:00", "2024-01-01")
        lifecycle.open_ticket("Second", "14:00", "2024-01-01")

        timer.fire(1)

        assert timer.live_schedules == 1
        assert lifecycle.time_remaining == 3599
        assert lifecycle.ticket is not None
        assert lifecycle.ticket.destination == "Second"

    def test_resync_recomputes_from_clock(
        self, lifecycle: TicketLifecycle, timer: FakeTickTimer, clock: FakeClock
    ) -> None:
        """Given the clock moved 10 minutes without ticks, when resyncing, then time catches up."""
        lifecycle.open_ticket("Market", "14:00", "2024-01-01")
        timer.fire(2)
        clock.now = NOW + timedelta(minutes=10)

        assert lifecycle.resync() == 3000
        assert lifecycle.status() is not None


class TestCloseTicket:
    """Tests for closing tickets."""

    def test_close_stops_timer_and_discards_ticket(
        self, lifecycle: TicketLifecycle, timer: FakeTickTimer
    ) -> None:
        """Given an active ticket, when closing, then no ticket and no live timer."""
        lifecycle.open_ticket("Market", "14:00", "2024-01-01")

        lifecycle.close_ticket()

        assert lifecycle.state is TicketState.NO_TICKET
        assert lifecycle.ticket is None
        assert lifecycle.status() is None
        assert not timer.is_running

    def test_close_without_ticket_is_safe(self, lifecycle: TicketLifecycle) -> None:
        """Given no ticket, when closing, then nothing is raised and state stays NO_TICKET."""
        lifecycle.close_ticket()

        assert lifecycle.state is TicketState.NO_TICKET

    def test_close_after_expiry(self, lifecycle: TicketLifecycle, timer: FakeTickTimer) -> None:
        """Given an expired ticket, when closing, then it closes normally."""
        lifecycle.open_ticket("Market", "12:00", "2024-01-01")
        timer.fire(3)

        lifecycle.close_ticket()

        assert lifecycle.state is TicketState.NO_TICKET

    def test_context_exit_releases_timer(self, timer: FakeTickTimer, clock: FakeClock) -> None:
        """Given a lifecycle used as context manager, when the block raises, then timer is released."""
        with pytest.raises(RuntimeError):
            with TicketLifecycle(timer, clock) as lifecycle:
                lifecycle.open_ticket("Market", "14:00", "2024-01-01")
                raise RuntimeError("view torn down")

        assert not timer.is_running
        assert lifecycle.state is TicketState.NO_TICKET


@pytest.mark.asyncio
async def test_double_open_with_real_timer_ticks_at_single_rate() -> None:
    """Given two opens in a row on a real timer, then decrements happen at one rate only."""
    timer = AsyncioTickTimer(interval_seconds=0.05)
    lifecycle = TicketLifecycle(timer, FakeClock(NOW))

    lifecycle.open_ticket("First", "14:00", "2024-01-01")
    lifecycle.open_ticket("Second", "14:00", "2024-01-01")
    await asyncio.sleep(0.53)
    elapsed_ticks = 3600 - lifecycle.time_remaining
    lifecycle.close_ticket()

    # one timer gives ~10 ticks in 0.53s, two timers would give ~20
    assert 5 <= elapsed_ticks <= 12
    assert not timer.is_running
