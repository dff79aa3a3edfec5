from sqlalchemy import Column, Integer, String, Boolean, ForeignKey
from sss_registry.database import Base


class ApplicantAddress(Base):
    __tablename__ = "applicant_addresses"

    address_id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    applicant_id = Column(Integer, ForeignKey("applicants.applicant_id"), nullable=False, index=True)
    address_1 = Column(String(255))  # unit / room / floor
    address_2 = Column(String(255))  # building
    address_3 = Column(String(255))  # lot / block / house number
    address_4 = Column(String(255))  # street
    address_5 = Column(String(255))  # subdivision / barangay
    address_6 = Column(String(255))  # city / municipality
    address_7 = Column(String(255))  # province
    address_8 = Column(String(255))  # country
    address_9 = Column(String(20))  # zip code
    same_as_pbirth = Column(Boolean, default=False, nullable=False)

    def __repr__(self):
        return f"<ApplicantAddress(applicant_id={self.applicant_id}, city='{self.address_6}', province='{self.address_7}')>"
