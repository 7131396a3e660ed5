# Fleet Management — Database Models
# Import all models here for SQLAlchemy discovery

from app.models.truck import Truck, TruckStatus   # noqa
from app.models.user import User, Role            # noqa
