from sqlalchemy import Column, Integer, String, Date, ForeignKey
from sss_registry.database import Base


class ApplicantSpouse(Base):
    __tablename__ = "applicant_spouse"

    spouse_id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    applicant_id = Column(Integer, ForeignKey("applicants.applicant_id"), nullable=False, index=True)
    lspouse = Column(String(100))
    fspouse = Column(String(100))
    mspouse = Column(String(100))
    sfxspouse = Column(String(20))
    sbirth = Column(Date)

    def __repr__(self):
        return f"<ApplicantSpouse(applicant_id={self.applicant_id}, name='{self.fspouse} {self.lspouse}')>"
