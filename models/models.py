from flask_sqlalchemy import SQLAlchemy
db = SQLAlchemy()


class ScholarshipApplication(db.Model):
    __tablename__ = 'scholarship_applications'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(128), nullable=False)
    course_name = db.Column(db.String(128), nullable=False)
    year_of_study = db.Column(db.Integer, nullable=False)
    created_at = db.Column(db.DateTime, nullable=True)
    updated_at = db.Column(db.DateTime, nullable=True)
    # Yes/No answers are stored as 0/1
    student_salaried = db.Column(db.SmallInteger, nullable=False, default=0)
    father_alive = db.Column(db.SmallInteger, nullable=False, default=0)
    father_working = db.Column(db.SmallInteger, nullable=False, default=0)
    father_occupation = db.Column(db.String(128), nullable=True)
    mother_alive = db.Column(db.SmallInteger, nullable=False, default=0)
    mother_working = db.Column(db.SmallInteger, nullable=False, default=0)
    mother_occupation = db.Column(db.String(128), nullable=True)
    marksheet_upload = db.Column(db.String(255), nullable=True)
    aadhar_no = db.Column(db.String(32), nullable=False)
    cap_id = db.Column(db.String(64), nullable=False)

    def __repr__(self):
        return f"<ScholarshipApplication {self.id} {self.name}>"
