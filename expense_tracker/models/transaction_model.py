from expense_tracker.models import db, new_id, isoformat


class Transaction(db.Model):
    """
    A dated monetary record owned by exactly one user and classified by
    one category.
    """

    __tablename__ = "transactions"

    id = db.Column(db.String(36), primary_key=True, default=new_id)

    # Ownership
    user_id = db.Column(db.String(36), db.ForeignKey("users.id"), index=True, nullable=False)

    # Classification
    type = db.Column(db.String(20), nullable=False)
    category_id = db.Column(db.String(36), db.ForeignKey("categories.id"), index=True, nullable=False)

    # Core transaction data
    amount = db.Column(db.Numeric(12, 2), nullable=False)
    date = db.Column(db.DateTime, nullable=False, index=True)
    description = db.Column(db.Text, nullable=False)
    payment_mode = db.Column(db.String(10), nullable=False)  # ONLINE | CASH

    # Optional extras
    recurrence = db.Column(db.String(10), nullable=True)  # declarative only
    related_to = db.Column(db.String(255), nullable=True)  # counterparty for credit entries
    is_paid = db.Column(db.Boolean, nullable=True)

    created_at = db.Column(db.DateTime, server_default=db.func.now())
    updated_at = db.Column(db.DateTime, server_default=db.func.now(), onupdate=db.func.now())

    user = db.relationship("User", back_populates="transactions")
    category = db.relationship("Category", back_populates="transactions")

    def to_dict(self):
        return {
            "id": self.id,
            "type": self.type,
            "category": self.category_id,
            "amount": float(self.amount),
            "date": isoformat(self.date),
            "description": self.description,
            "paymentMode": self.payment_mode,
            "recurrence": self.recurrence,
            "relatedTo": self.related_to,
            "isPaid": self.is_paid,
            "userId": self.user_id,
            "createdAt": isoformat(self.created_at),
            "updatedAt": isoformat(self.updated_at),
        }
