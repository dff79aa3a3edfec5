from sqlalchemy import Column, Integer, String, ForeignKey
from sss_registry.database import Base


class ApplicantEmployment(Base):
    __tablename__ = "applicant_employment"

    employment_id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    applicant_id = Column(Integer, ForeignKey("applicants.applicant_id"), nullable=False, index=True)
    employment_type = Column(String(50), nullable=False)  # Self-Employed, OFW, Non-Working Spouse
    profession = Column(String(255))
    ystart = Column(String(10))
    mearning = Column(String(50))
    faddress = Column(String(255))  # foreign address, OFW only
    ofw_monthly_earnings = Column(String(50))
    spouse_ssnum = Column(String(20))  # working spouse, Non-Working Spouse only
    ffprogram = Column(String(50))  # flexi-fund program
    ffp = Column(String(50))

    def __repr__(self):
        return f"<ApplicantEmployment(applicant_id={self.applicant_id}, type='{self.employment_type}')>"
