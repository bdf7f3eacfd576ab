# carecompanion/models/__init__.py
from .user import User
from .medication import Medication
from .medication_schedule import MedicationSchedule
from .medication_log import MedicationLog, LOG_STATUSES
from .health_metric import HealthMetric
from .health_goal import HealthGoal
from .health_tip import HealthTip
from .appointment import Appointment, APPOINTMENT_STATUSES
