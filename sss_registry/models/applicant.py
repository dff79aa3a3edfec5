from sqlalchemy import Column, Integer, String, Date
from sss_registry.database import Base


class Applicant(Base):
    """Root of the applicant aggregate"""
    __tablename__ = "applicants"

    applicant_id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    ssnum = Column(String(20), index=True)
    lname = Column(String(100), index=True)
    fname = Column(String(100), index=True)
    mname = Column(String(100))
    sfx = Column(String(20))
    dbirth = Column(Date)
    sex = Column(String(10))  # M/F
    cvstatus = Column(String(50))  # Single, Married, Widowed, Legally Separated, Others
    cvstatus_other = Column(String(100))
    taxid = Column(String(50))
    nation = Column(String(100))
    religion = Column(String(100))
    pbirth = Column(String(255))
    cphone = Column(String(20))
    email = Column(String(255), index=True)
    tphone = Column(String(20))
    printed_name = Column(String(255))
    cert_date = Column(Date)

    def __repr__(self):
        return f"<Applicant(id={self.applicant_id}, name='{self.fname} {self.lname}', ssnum='{self.ssnum}')>"
