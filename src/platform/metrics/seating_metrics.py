from prometheus_client import Counter, Histogram


class SeatingMetrics:
    """
    Seating Service Core Metrics Collector

    Tracks batch reconciliation outcomes and seat block toggles per event
    """

    def __init__(self):
        # ========== Reservation Batch Metrics ==========
        self.reservation_batches = Counter(
            'seat_reservation_batches_total',
            'Total reservation change batches',
            ['event_id', 'result'],  # result: success/validation_error/conflict/storage_error
        )

        self.reservation_changes = Counter(
            'seat_reservation_changes_total',
            'Reservation changes applied',
            ['event_id', 'kind'],  # kind: insert/delete/update
        )

        self.reservation_batch_duration = Histogram(
            'seat_reservation_batch_duration_seconds',
            'Reservation batch processing time',
            ['event_id'],
            buckets=[0.005, 0.01, 0.05, 0.1, 0.2, 0.5, 1.0, 2.0, 5.0],
        )

        # ========== Seat Block Metrics ==========
        self.seat_block_toggles = Counter(
            'seat_block_toggles_total',
            'Seat block toggle outcomes',
            ['event_id', 'action'],  # action: blocked/unblocked/skipped
        )

    # ========== Helper Methods ==========

    def record_reservation_batch(self, *, event_id: int, result: str, duration: float):
        self.reservation_batches.labels(event_id=event_id, result=result).inc()
        self.reservation_batch_duration.labels(event_id=event_id).observe(duration)

    def record_reservation_changes(self, *, event_id: int, kind: str, count: int):
        if count:
            self.reservation_changes.labels(event_id=event_id, kind=kind).inc(count)

    def record_seat_block_toggle(self, *, event_id: int, action: str):
        self.seat_block_toggles.labels(event_id=event_id, action=action).inc()


# Global metrics instance
metrics = SeatingMetrics()
