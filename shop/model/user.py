# --- shop/model/user.py ---

from ..extensions import db

class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    email = db.Column(db.Text, unique=True)
    # werkzeug hash, stored in the "password" column
    password_hash = db.Column("password", db.Text)

    def as_dict(self):
        return {"id": self.id, "email": self.email}
