from models.seat import Seat
from models.passenger import Passenger, FamilyGroup, PassengerClasses
from models.allocation import SeatAssignment, UnseatedPassenger, AllocationResult
