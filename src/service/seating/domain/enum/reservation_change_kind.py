from enum import StrEnum


class ReservationChangeKind(StrEnum):
    """
    Derived from which participant fields a change request carries:

    participant_id | old_participant_id | kind
    ---------------+--------------------+-------
    present        | absent             | INSERT
    absent         | present            | DELETE
    present        | present            | UPDATE
    """

    INSERT = 'insert'
    DELETE = 'delete'
    UPDATE = 'update'
