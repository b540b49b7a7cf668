# Vehicle Rental Backend: Database Models
# Import all models here for SQLAlchemy discovery

from app.models import lifecycle                     # noqa  (registers before_flush stamping)
from app.models.customer import Customer             # noqa
from app.models.vehicle import Vehicle               # noqa
from app.models.rental import Rental                 # noqa
