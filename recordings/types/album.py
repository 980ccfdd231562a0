import sqlalchemy as sa
from ..database import Base


class Album(Base):
    __tablename__ = "album"
    id = sa.Column(sa.Integer, primary_key=True, autoincrement=True)
    title = sa.Column(sa.String(128), nullable=False)
    artist = sa.Column(sa.String(255), nullable=False)
    price = sa.Column(sa.Numeric(5, 2, asdecimal=False), nullable=False)

    def json(self):
        # ids travel as strings inside album objects
        return dict(
            id=str(self.id) if self.id is not None else None,
            title=self.title,
            artist=self.artist,
            price=self.price,
        )

    def __str__(self):
        return f"{self.title} by {self.artist}"
