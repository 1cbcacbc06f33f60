from datetime import datetime
from app import create_app
from models.models import db, ScholarshipApplication

SAMPLE_APPLICATIONS = [
    dict(id=1, name='Asha Patil', course_name='B.Sc. Computer Science', year_of_study=2,
         created_at=datetime(2024, 3, 5, 10, 30), updated_at=datetime(2024, 3, 9, 16, 0),
         student_salaried=0, father_alive=1, father_working=1, father_occupation='Farmer',
         mother_alive=1, mother_working=0, mother_occupation=None,
         marksheet_upload='uploads/marksheets/1.pdf', aadhar_no='123412341234', cap_id='CAP2024001'),
    dict(id=2, name='Rohan Deshmukh', course_name='B.E. Mechanical', year_of_study=3,
         created_at=datetime(2024, 4, 1, 9, 15), updated_at=None,
         student_salaried=1, father_alive=0, father_working=0, father_occupation=None,
         mother_alive=1, mother_working=1, mother_occupation='Teacher',
         marksheet_upload=None, aadhar_no='567856785678', cap_id='CAP2024002'),
]

app = create_app()

with app.app_context():
    db.create_all()
    for data in SAMPLE_APPLICATIONS:
        if not db.session.get(ScholarshipApplication, data['id']):
            db.session.add(ScholarshipApplication(**data))
    db.session.commit()
    print('Seed data inserted successfully!')
