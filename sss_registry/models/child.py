from sqlalchemy import Column, Integer, String, Date, ForeignKey
from sss_registry.database import Base


class ApplicantChild(Base):
    __tablename__ = "applicant_children"

    child_id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    applicant_id = Column(Integer, ForeignKey("applicants.applicant_id"), nullable=False, index=True)
    lname = Column(String(100))
    fname = Column(String(100))
    mname = Column(String(100))
    sfx = Column(String(20))
    dbirth = Column(Date)

    def __repr__(self):
        return f"<ApplicantChild(applicant_id={self.applicant_id}, name='{self.fname} {self.lname}', birth={self.dbirth})>"
