from expense_tracker.models import db, new_id, isoformat


class Category(db.Model):
    """
    Shared, user-independent label used to classify transactions.
    """

    __tablename__ = "categories"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    title = db.Column(db.String(100), nullable=False)
    type = db.Column(db.String(20), nullable=False)  # INCOME | EXPENSE | CREDIT_GIVEN | CREDIT_RECEIVED
    icon = db.Column(db.String(100), nullable=True)
    created_at = db.Column(db.DateTime, server_default=db.func.now())
    updated_at = db.Column(db.DateTime, server_default=db.func.now(), onupdate=db.func.now())

    transactions = db.relationship("Transaction", back_populates="category", lazy="dynamic")

    __table_args__ = (
        db.UniqueConstraint("title", "type", name="uq_category_title_type"),
    )

    def to_dict(self, transactions=None):
        data = {
            "id": self.id,
            "title": self.title,
            "type": self.type,
            "icon": self.icon,
            "createdAt": isoformat(self.created_at),
            "updatedAt": isoformat(self.updated_at),
        }
        if transactions is not None:
            data["transactions"] = [t.to_dict() for t in transactions]
        return data
