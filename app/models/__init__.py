# Church Visitors - Database Models
# Import all models here for SQLAlchemy discovery

from app.models.storage_entry import StorageEntry     # noqa
