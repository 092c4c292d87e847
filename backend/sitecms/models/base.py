from sitecms.extensions import db


class BaseModel(db.Model):
    __abstract__ = True

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)

    def __init__(self, **kwargs):
        """
        Dummy __init__ to satisfy static type checkers (Pylance, MyPy).
        SQLAlchemy ORM will populate fields dynamically.
        """
        super().__init__(**kwargs)

    def to_record(self):
        """Plain dict of column values, keyed by attribute name."""
        return {
            column.key: getattr(self, column.key)
            for column in self.__mapper__.column_attrs
        }
