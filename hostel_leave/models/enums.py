"""Enumerations shared by models and schemas."""
import enum


class LeaveStatus(str, enum.Enum):
    """Leave request status."""
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"

    @property
    def label(self) -> str:
        """Display label shown to students, e.g. 'Pending'."""
        return self.value.capitalize()
