from sqlalchemy import Column, Integer, String, Date, ForeignKey
from sss_registry.database import Base


class ApplicantParents(Base):
    __tablename__ = "applicant_parents"

    parents_id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    applicant_id = Column(Integer, ForeignKey("applicants.applicant_id"), nullable=False, index=True)
    lfather = Column(String(100))
    ffather = Column(String(100))
    mfather = Column(String(100))
    sfxfather = Column(String(20))
    fbirth = Column(Date)
    lmother = Column(String(100))
    fmother = Column(String(100))
    mmother = Column(String(100))
    sfxmother = Column(String(20))
    mbirth = Column(Date)

    def __repr__(self):
        return f"<ApplicantParents(applicant_id={self.applicant_id}, father='{self.ffather} {self.lfather}', mother='{self.fmother} {self.lmother}')>"
