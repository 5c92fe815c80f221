from league_api import db


class Document(db.Model):
    """A JSON document stored under a caller-supplied key"""
    __tablename__ = 'documents'

    key = db.Column(db.String(255), primary_key=True)
    type = db.Column(db.String(64), nullable=True, index=True)  # copied from content['type']
    content = db.Column(db.JSON, nullable=False)
    cas = db.Column(db.Integer, nullable=False, default=1)  # bumped on every replace

    def __repr__(self):
        return f'<Document {self.key} type={self.type}>'
