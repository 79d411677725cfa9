from prometheus_client import Counter, Histogram


class TicketingMetrics:
    """
    Ticketing Client Core Metrics Collector

    Tracks the venue scanner and customer booking flows proxied to the upstream API
    """

    def __init__(self):
        # ========== Scanner Metrics ==========
        self.ticket_scans = Counter(
            'ticket_scans_total',
            'Total ticket verification scans',
            ['event_id', 'result'],  # result: success/error
        )

        self.ticket_scan_duration = Histogram(
            'ticket_scan_duration_seconds',
            'Ticket verification duration including enrichment',
            ['event_id'],
            buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
        )

        self.mark_attended = Counter(
            'ticket_mark_attended_total',
            'Mark attended attempts',
            ['event_id', 'result'],  # result: marked/already_attended/error
        )

        # ========== Booking Metrics ==========
        self.bookings = Counter(
            'ticket_bookings_total',
            'Ticket booking submissions',
            ['flow', 'result'],  # flow: show/events
        )

        self.entry_pass_purchases = Counter(
            'entry_pass_purchases_total',
            'Entry pass purchases',
            ['result'],
        )

        self.entry_pass_heads_purchased = Counter(
            'entry_pass_heads_purchased_total',
            'Head count bought through entry pass purchases',
        )

    # ========== Helper Methods ==========

    def record_scan(self, *, event_id: str, result: str, duration: float):
        self.ticket_scans.labels(event_id=event_id, result=result).inc()
        self.ticket_scan_duration.labels(event_id=event_id).observe(duration)

    def record_mark_attended(self, *, event_id: str, result: str):
        self.mark_attended.labels(event_id=event_id, result=result).inc()

    def record_booking(self, *, flow: str, result: str):
        self.bookings.labels(flow=flow, result=result).inc()

    def record_entry_pass_purchase(self, *, result: str, head_count: int = 0):
        self.entry_pass_purchases.labels(result=result).inc()
        if head_count:
            self.entry_pass_heads_purchased.inc(head_count)


# Global metrics instance
metrics = TicketingMetrics()
