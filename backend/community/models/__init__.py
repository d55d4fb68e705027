from community.models.reference import City, College, CollegeCourse, Department, SubDepartment, Village
from community.models.user import User
from community.models.occupation import BusinessDetail, JobDetail, StudentDetail
from community.models.otp import OtpVerification
