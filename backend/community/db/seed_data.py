"""Reference data loaded by scripts/seed_reference_data.py."""

# (name, taluka, district)
VILLAGES = [
    ("અમરેલી (Amreli)", "Amreli", "Amreli"),
    ("વરસડા (Varsada)", "Amreli", "Amreli"),
    ("હરીપુરા (Haripura)", "Amreli", "Amreli"),
    ("શેડુભાર (Shedubhar)", "Amreli", "Amreli"),
    ("નાના માચિયાળા (Nana Machiyala)", "Amreli", "Amreli"),
    ("મોટા માચિયાળા (Mota Machiyala)", "Amreli", "Amreli"),
    ("વેણીવદર (Venivader)", "Amreli", "Amreli"),
    ("વરુડી (Varudi)", "Amreli", "Amreli"),
    ("સાંગાડેરી (Sangaderi)", "Amreli", "Amreli"),
    ("નાના આંકડીયા (Nana Ankadiya)", "Amreli", "Amreli"),
    ("લાલાવદર (Lalavader)", "Amreli", "Amreli"),
    ("કેરીયાનાગસ (Keriyangas)", "Amreli", "Amreli"),
    ("ઈશ્વરીયા (Ishwariya)", "Amreli", "Amreli"),
    ("કમીગઢ (Kamigadh)", "Amreli", "Amreli"),
    ("બાબરા (Babra)", "Babra", "Amreli"),
    ("વલારડી (Valardi)", "Babra", "Amreli"),
    ("પીર ખીજડીયા (Pir Khijadiya)", "Babra", "Amreli"),
    ("વાલપુર અમર (Valpur Amar)", "Babra", "Amreli"),
    ("કુંવરગઢ (Kunvargadh)", "Babra", "Amreli"),
    ("નવાણીયા (Navaniya)", "Babra", "Amreli"),
    ("ખંભાળા (Khambhala)", "Babra", "Amreli"),
    ("ખાખરીયા (Khakhariya)", "Babra", "Amreli"),
    ("બરવાળા જામ (Barvala Jam)", "Babra", "Amreli"),
    ("ગળકોટડી (Galkotdi)", "Babra", "Amreli"),
    ("રાણપરડા (Ranparda)", "Babra", "Amreli"),
    ("નડાળા (Nadala)", "Babra", "Amreli"),
    ("લોન કોટડા (Lon Kotda)", "Babra", "Amreli"),
    ("મોટા દેવળીયા (Mota Devaliya)", "Babra", "Amreli"),
    ("ખીજડીયા કોટડા (Khijadiya Kotda)", "Babra", "Amreli"),
    ("સારીગપુર (Sarigpur)", "Babra", "Amreli"),
    ("લાઠી (Lathi)", "Lathi", "Amreli"),
    ("ચાવંડ (Chavand)", "Lathi", "Amreli"),
    ("હરસુરપુર દેવળીયા (Harsurpur Devaliya)", "Lathi", "Amreli"),
    ("લાઠી કેરીયા (Lathi Keriya)", "Lathi", "Amreli"),
    ("કરકોલીયા (Karkoliya)", "Lathi", "Amreli"),
    ("ભુરખીયા (Bhurakhiya)", "Lathi", "Amreli"),
    ("પ્રતાપગઢ (Pratapgadh)", "Lathi", "Amreli"),
    ("મતિરાળા (Matirala)", "Lathi", "Amreli"),
    ("લીલીયા (Liliya)", "Liliya", "Amreli"),
    ("સલડી (Saladi)", "Liliya", "Amreli"),
    ("ઉમિયાનગર (Umiyanagar)", "Liliya", "Amreli"),
    ("ખારા (Khara)", "Liliya", "Amreli"),
    ("સનાળીયા (Sanaliya)", "Liliya", "Amreli"),
    ("રામપુર (Rampur)", "Kunkavav", "Amreli"),
    ("સૂર્યપ્રતાપગઢ (Suryapratapgadh)", "Kunkavav", "Amreli"),
    ("પીપળીયા (Pipliya)", "Kunkavav", "Amreli"),
    ("ખજુરી (Khajuri)", "Kunkavav", "Amreli"),
    ("અનીડા (Anida)", "Kunkavav", "Amreli"),
    ("તરઘરી (Targhari)", "Kunkavav", "Amreli"),
    ("તાલાળી (Talali)", "Kunkavav", "Amreli"),
    ("વાવડી રોડ (Vavdi Road)", "Kunkavav", "Amreli"),
    ("નવા ઉજળા (Nava Ujla)", "Kunkavav", "Amreli"),
    ("નાની કુંકાવાવ (Nani Kunkavav)", "Kunkavav", "Amreli"),
    ("લાખાપાદર (Lakhapadar)", "Kunkavav", "Amreli"),
    ("અમરનગર (Amarnagar)", "Kunkavav", "Amreli"),
    ("વાવ (Vav)", "Bhavnagar", "Bhavnagar"),
    ("ચુરકા (Churka)", "Bhavnagar", "Bhavnagar"),
    ("ધારૂકા (Dharuka)", "Bhavnagar", "Bhavnagar"),
    ("લીંબાળી (Limbali)", "Bhavnagar", "Bhavnagar"),
    ("જસદણ (Jasdan)", "Jasdan", "Rajkot"),
    ("કાનપર (Kanpar)", "Jasdan", "Rajkot"),
    ("આટકોટ (Atkot)", "Jasdan", "Rajkot"),
    ("કાળાસર (Kalasar)", "Jasdan", "Rajkot"),
    ("માધવીપુર (Madhavipur)", "Jasdan", "Rajkot"),
    ("રાણપર (Ranpar)", "Jasdan", "Rajkot"),
    ("કમળાપુર (Kamlapur)", "Jasdan", "Rajkot"),
    ("સરધાર (Sardhar)", "Jasdan", "Rajkot"),
    ("કરમાળકોટડા (Karmalkotda)", "Jasdan", "Rajkot"),
    ("ગઢકા (Gadhka)", "Jasdan", "Rajkot"),
    ("હરીપર (Haripar)", "Jasdan", "Rajkot"),
    ("દેરડી કુંભાજી (Derdi Kumbhaji)", "Gondal", "Rajkot"),
    ("મેતા ખંભાળીયા (Meta Khambhaliya)", "Gondal", "Rajkot"),
    ("કમર કોટડા (Kamar Kotda)", "Gondal", "Rajkot"),
    ("વિંજીવડ (Vinjivad)", "Gondal", "Rajkot"),
    ("પ્રેમગઢ (Premgadh)", "Gondal", "Rajkot"),
    ("સરધારપુર (Sardharpur)", "Junagadh", "Junagadh"),
    ("રફાળીયા (Rafaliya)", "Junagadh", "Junagadh"),
    ("કાલસરી (Kalsari)", "Junagadh", "Junagadh"),
]

# (name, state)
CITIES = [
    ("Ahmedabad", "Gujarat"),
    ("Amreli", "Gujarat"),
    ("Anand", "Gujarat"),
    ("Aravalli (Modasa)", "Gujarat"),
    ("Banaskantha (Palanpur)", "Gujarat"),
    ("Bharuch", "Gujarat"),
    ("Bhavnagar", "Gujarat"),
    ("Botad", "Gujarat"),
    ("Chhota Udepur", "Gujarat"),
    ("Dahod", "Gujarat"),
    ("Dang (Ahwa)", "Gujarat"),
    ("Devbhoomi Dwarka (Khambhalia)", "Gujarat"),
    ("Gandhinagar", "Gujarat"),
    ("Gir Somnath (Veraval)", "Gujarat"),
    ("Jamnagar", "Gujarat"),
    ("Junagadh", "Gujarat"),
    ("Kheda (Nadiad)", "Gujarat"),
    ("Kutch (Bhuj)", "Gujarat"),
    ("Mahisagar (Lunawada)", "Gujarat"),
    ("Mehsana", "Gujarat"),
    ("Morbi", "Gujarat"),
    ("Narmada (Rajpipla)", "Gujarat"),
    ("Navsari", "Gujarat"),
    ("Panchmahal (Godhra)", "Gujarat"),
    ("Patan", "Gujarat"),
    ("Porbandar", "Gujarat"),
    ("Rajkot", "Gujarat"),
    ("Sabarkantha (Himmatnagar)", "Gujarat"),
    ("Surat", "Gujarat"),
    ("Surendranagar", "Gujarat"),
    ("Tapi (Vyara)", "Gujarat"),
    ("Vadodara", "Gujarat"),
    ("Valsad", "Gujarat"),
    ("Gondal", "Gujarat"),
    ("Jetpur", "Gujarat"),
    ("Gandhidham", "Gujarat"),
    ("Mundra", "Gujarat"),
    ("Dhoraji", "Gujarat"),
    ("Upleta", "Gujarat"),
    ("Jasdan", "Gujarat"),
    ("Wankaner", "Gujarat"),
    ("Tankara", "Gujarat"),
    ("Dhrangadhra", "Gujarat"),
    ("Viramgam", "Gujarat"),
    ("Sanand", "Gujarat"),
    ("Dholka", "Gujarat"),
    ("Kalol", "Gujarat"),
    ("Kadi", "Gujarat"),
    ("Unjha", "Gujarat"),
    ("Visnagar", "Gujarat"),
    ("Deesa", "Gujarat"),
    ("Dhanera", "Gujarat"),
    ("Idar", "Gujarat"),
    ("Shamlaji", "Gujarat"),
    ("Petlad", "Gujarat"),
    ("Borsad", "Gujarat"),
    ("Khambhat (Cambay)", "Gujarat"),
    ("Umreth", "Gujarat"),
    ("Tarapur", "Gujarat"),
    ("Kapadvanj", "Gujarat"),
    ("Thasra", "Gujarat"),
    ("Mahuva", "Gujarat"),
    ("Palitana", "Gujarat"),
    ("Sihor", "Gujarat"),
    ("Talaja", "Gujarat"),
    ("Gariadhar", "Gujarat"),
    ("Vallabhipur", "Gujarat"),
    ("Una", "Gujarat"),
    ("Kodinar", "Gujarat"),
    ("Sutrapada", "Gujarat"),
    ("Mangrol", "Gujarat"),
    ("Keshod", "Gujarat"),
    ("Visavadar", "Gujarat"),
    ("Manavadar", "Gujarat"),
    ("Vanthali", "Gujarat"),
    ("Rajula", "Gujarat"),
    ("Savarkundla", "Gujarat"),
    ("Babra", "Gujarat"),
    ("Jafrabad", "Gujarat"),
    ("Lathi", "Gujarat"),
    ("Damnagar", "Gujarat"),
    ("Dwarka", "Gujarat"),
    ("Okha", "Gujarat"),
    ("Bhanvad", "Gujarat"),
    ("Lalpur", "Gujarat"),
    ("Kalavad", "Gujarat"),
    ("Dhrol", "Gujarat"),
    ("Jodia", "Gujarat"),
    ("Anjar", "Gujarat"),
    ("Adipur", "Gujarat"),
    ("Mandvi", "Gujarat"),
    ("Nakhatrana", "Gujarat"),
    ("Rapar", "Gujarat"),
    ("Halvad", "Gujarat"),
    ("Limbdi", "Gujarat"),
    ("Chotila", "Gujarat"),
    ("Muli", "Gujarat"),
    ("Sayla", "Gujarat"),
    ("Wadhwan", "Gujarat"),
    ("Bardoli", "Gujarat"),
    ("Kamrej", "Gujarat"),
    ("Mandvi (Surat)", "Gujarat"),
    ("Olpad", "Gujarat"),
    ("Palsana", "Gujarat"),
    ("Songadh", "Gujarat"),
    ("Mahuva (Surat)", "Gujarat"),
    ("Mangrol (Surat)", "Gujarat"),
    ("Valod", "Gujarat"),
    ("Nizar", "Gujarat"),
    ("Fort Songadh", "Gujarat"),
    ("Uchchhal", "Gujarat"),
    ("Ankleshwar", "Gujarat"),
    ("Jambusar", "Gujarat"),
    ("Amod", "Gujarat"),
    ("Vagra", "Gujarat"),
    ("Hansot", "Gujarat"),
    ("Savli", "Gujarat"),
    ("Padra", "Gujarat"),
    ("Dabhoi", "Gujarat"),
    ("Karjan", "Gujarat"),
    ("Shinor", "Gujarat"),
    ("Sankheda", "Gujarat"),
    ("Bodeli", "Gujarat"),
    ("Naswadi", "Gujarat"),
    ("Kawant", "Gujarat"),
    ("Limkheda", "Gujarat"),
    ("Fatepura", "Gujarat"),
    ("Garbada", "Gujarat"),
    ("Jhalod", "Gujarat"),
    ("Devgad Baria", "Gujarat"),
    ("Santrampur", "Gujarat"),
    ("Kadana", "Gujarat"),
    ("Khanpur", "Gujarat"),
    ("Balasinor", "Gujarat"),
    ("Virpur", "Gujarat"),
    ("Halol", "Gujarat"),
    ("Kalol (Panchmahal)", "Gujarat"),
    ("Jambughoda", "Gujarat"),
    ("Morva Hadaf", "Gujarat"),
    ("Shehera", "Gujarat"),
    ("Bilimora", "Gujarat"),
    ("Chikhli", "Gujarat"),
    ("Gandevi", "Gujarat"),
    ("Jalalpore", "Gujarat"),
    ("Dungri", "Gujarat"),
    ("Vansda", "Gujarat"),
    ("Dharampur", "Gujarat"),
    ("Kaprada", "Gujarat"),
    ("Pardi", "Gujarat"),
    ("Umbergaon", "Gujarat"),
    ("Sarigam", "Gujarat"),
    ("Vapi", "Gujarat"),
    ("Daman", "Gujarat"),
    ("Silvassa", "Gujarat"),
    ("Mumbai", "Maharashtra"),
    ("Pune", "Maharashtra"),
    ("Nagpur", "Maharashtra"),
    ("Nashik", "Maharashtra"),
    ("Aurangabad", "Maharashtra"),
    ("Bangalore", "Karnataka"),
    ("Mysore", "Karnataka"),
    ("Mangalore", "Karnataka"),
    ("Delhi", "Delhi"),
    ("Noida", "Uttar Pradesh"),
    ("Gurgaon", "Haryana"),
    ("Faridabad", "Haryana"),
    ("Ghaziabad", "Uttar Pradesh"),
    ("Chennai", "Tamil Nadu"),
    ("Coimbatore", "Tamil Nadu"),
    ("Madurai", "Tamil Nadu"),
    ("Hyderabad", "Telangana"),
    ("Visakhapatnam", "Andhra Pradesh"),
    ("Vijayawada", "Andhra Pradesh"),
    ("Jaipur", "Rajasthan"),
    ("Jodhpur", "Rajasthan"),
    ("Udaipur", "Rajasthan"),
    ("Kota", "Rajasthan"),
    ("Indore", "Madhya Pradesh"),
    ("Bhopal", "Madhya Pradesh"),
    ("Gwalior", "Madhya Pradesh"),
    ("Kolkata", "West Bengal"),
    ("Kochi", "Kerala"),
    ("Thiruvananthapuram", "Kerala"),
    ("Chandigarh", "Punjab"),
    ("Ludhiana", "Punjab"),
    ("Amritsar", "Punjab"),
    ("Lucknow", "Uttar Pradesh"),
    ("Kanpur", "Uttar Pradesh"),
    ("Varanasi", "Uttar Pradesh"),
    ("Allahabad", "Uttar Pradesh"),
    ("Patna", "Bihar"),
    ("Bhubaneswar", "Odisha"),
    ("Ranchi", "Jharkhand"),
    ("Guwahati", "Assam"),
    ("Dehradun", "Uttarakhand"),
    ("Shimla", "Himachal Pradesh"),
    ("Panaji", "Goa"),
]

# (name, category, sub-departments)
DEPARTMENTS = [
    ("B.Tech / B.E.", "Engineering", ["Computer Science & Engineering", "Information Technology", "Mechanical Engineering", "Civil Engineering", "Electrical Engineering", "Electronics & Communication", "Chemical Engineering", "Biotechnology", "Aerospace Engineering", "Automobile Engineering"]),
    ("MBBS", "Medical", ["General Medicine", "Surgery", "Pediatrics", "Orthopedics", "Gynecology", "Cardiology", "Neurology", "Dermatology", "Ophthalmology", "ENT"]),
    ("BDS", "Medical", ["Oral Surgery", "Orthodontics", "Periodontics", "Prosthodontics", "Pedodontics"]),
    ("MBA", "Management", ["Finance", "Marketing", "Human Resources", "Operations", "Information Technology", "International Business", "Entrepreneurship", "Healthcare Management"]),
    ("BBA", "Management", ["Finance", "Marketing", "Human Resources", "International Business", "Entrepreneurship"]),
    ("B.Sc", "Science", ["Physics", "Chemistry", "Mathematics", "Biology", "Biotechnology", "Computer Science", "Microbiology", "Zoology", "Botany"]),
    ("M.Sc", "Science", ["Physics", "Chemistry", "Mathematics", "Biology", "Biotechnology", "Computer Science", "Microbiology"]),
    ("B.Com", "Commerce", ["Accounting", "Finance", "Banking", "Taxation", "Business Management"]),
    ("M.Com", "Commerce", ["Accounting", "Finance", "Banking", "Business Management"]),
    ("BA", "Arts", ["English", "Hindi", "Gujarati", "Psychology", "Sociology", "Political Science", "History", "Economics", "Geography"]),
    ("MA", "Arts", ["English", "Hindi", "Psychology", "Sociology", "Political Science", "Economics"]),
    ("LLB", "Law", ["Criminal Law", "Corporate Law", "Civil Law", "Constitutional Law", "International Law"]),
    ("B.Pharm", "Pharmacy", ["Pharmaceutical Chemistry", "Pharmacology", "Pharmaceutics", "Pharmacognosy"]),
    ("B.Arch", "Architecture", ["Architecture Design", "Urban Planning", "Interior Design", "Landscape Architecture"]),
    ("CA", "Professional", ["Accounting", "Auditing", "Taxation", "Financial Management"]),
    ("Diploma", "Technical", ["Mechanical Engineering", "Civil Engineering", "Electrical Engineering", "Computer Engineering", "Electronics Engineering"]),
    ("ITI", "Technical", ["Electrician", "Fitter", "Turner", "Welder", "Mechanic", "COPA"]),
    ("PhD", "Research", ["Engineering", "Science", "Medical", "Management", "Arts & Humanities", "Law"]),
    ("Other", "Other", ["Other"]),
]

# (name, city, courses)
COLLEGES = [
    ("Nirma University", "Ahmedabad", ["B.Tech", "M.Tech", "MBA", "B.Pharm", "LLB", "B.Com", "BBA", "B.Sc", "MCA", "BCA"]),
    ("Gujarat University", "Ahmedabad", ["BA", "MA", "B.Com", "M.Com", "B.Sc", "M.Sc", "BBA", "MBA", "LLB", "B.Ed"]),
    ("LD College of Engineering", "Ahmedabad", ["B.Tech", "M.Tech", "Diploma"]),
    ("CEPT University", "Ahmedabad", ["B.Arch", "M.Arch", "MBA"]),
    ("GLS University", "Ahmedabad", ["BBA", "MBA", "BCA", "MCA", "B.Com", "M.Com", "BA", "LLB"]),
    ("B.J. Medical College", "Ahmedabad", ["MBBS", "MD", "MS"]),
    ("Adani University", "Ahmedabad", ["B.Tech", "M.Tech", "MBA", "BBA"]),
    ("Ahmedabad University", "Ahmedabad", ["B.Tech", "MBA", "BA", "B.Sc", "BBA", "MCA"]),
    ("Pandit Deendayal Energy University (PDEU)", "Ahmedabad", ["B.Tech", "M.Tech", "MBA"]),
    ("Silver Oak University", "Ahmedabad", ["B.Tech", "M.Tech", "Diploma", "BCA", "MCA", "B.Pharm"]),
    ("GMERS Medical College", "Ahmedabad", ["MBBS", "MD", "MS"]),
    ("Government Dental College", "Ahmedabad", ["BDS", "MDS"]),
    ("IIT Gandhinagar", "Ahmedabad", ["B.Tech", "M.Tech", "PhD"]),
    ("DAIICT", "Ahmedabad", ["B.Tech", "M.Tech", "MCA", "PhD"]),
    ("L.J. University", "Ahmedabad", ["B.Tech", "MBA", "B.Pharm", "BCA", "Diploma"]),
    ("Indus University", "Ahmedabad", ["B.Tech", "MBA", "B.Arch", "Diploma", "B.Pharm"]),
    ("Gujarat Law Society", "Ahmedabad", ["LLB", "LLM"]),
    ("H.L. College of Commerce", "Ahmedabad", ["B.Com", "M.Com", "BBA"]),
    ("Gujarat Vidyapith", "Ahmedabad", ["BA", "MA", "B.Ed", "B.Sc"]),
    ("MS University (MSU)", "Vadodara", ["B.Tech", "M.Tech", "MBA", "BA", "MA", "B.Sc", "M.Sc", "B.Com", "M.Com", "BCA", "MCA", "LLB", "B.Ed", "B.Pharm"]),
    ("Parul University", "Vadodara", ["B.Tech", "M.Tech", "MBBS", "BDS", "B.Pharm", "MBA", "BBA", "BCA", "MCA", "Diploma", "B.Arch", "LLB"]),
    ("Medical College Baroda", "Vadodara", ["MBBS", "MD", "MS"]),
    ("Government Polytechnic Vadodara", "Vadodara", ["Diploma"]),
    ("ITM Universe", "Vadodara", ["B.Tech", "MBA", "BBA", "BCA"]),
    ("Navrachana University", "Vadodara", ["B.Tech", "B.Arch", "BBA", "B.Sc"]),
    ("SVNIT", "Surat", ["B.Tech", "M.Tech", "PhD"]),
    ("VNSGU", "Surat", ["BA", "MA", "B.Com", "M.Com", "B.Sc", "M.Sc", "BBA", "MBA", "BCA", "MCA", "LLB", "B.Ed"]),
    ("Government Medical College Surat", "Surat", ["MBBS", "MD", "MS"]),
    ("SCET", "Surat", ["B.Tech", "M.Tech", "Diploma"]),
    ("UKA Tarsadia University", "Surat", ["B.Tech", "MBA", "B.Pharm", "BCA", "Diploma"]),
    ("Saurashtra University", "Rajkot", ["BA", "MA", "B.Com", "M.Com", "B.Sc", "M.Sc", "BBA", "MBA", "BCA", "MCA", "LLB", "B.Ed"]),
    ("RK University", "Rajkot", ["B.Tech", "M.Tech", "MBA", "BBA", "BCA", "B.Pharm", "Diploma"]),
    ("Marwadi University", "Rajkot", ["B.Tech", "M.Tech", "MBA", "BBA", "BCA", "MCA", "Diploma"]),
    ("PDU Medical College", "Rajkot", ["MBBS", "MD", "MS"]),
    ("Government Engineering College Rajkot", "Rajkot", ["B.Tech", "M.Tech", "Diploma"]),
    ("ATMIYA University", "Rajkot", ["B.Tech", "MBA", "BCA", "B.Com", "B.Sc"]),
    ("Bhavnagar University", "Bhavnagar", ["BA", "MA", "B.Com", "M.Com", "B.Sc", "M.Sc", "BBA", "MBA", "BCA", "MCA", "LLB", "B.Ed"]),
    ("Sir PP Science Institute", "Bhavnagar", ["B.Sc", "M.Sc"]),
    ("Government Medical College Bhavnagar", "Bhavnagar", ["MBBS", "MD", "MS"]),
    ("Government Engineering College Bhavnagar", "Bhavnagar", ["B.Tech", "Diploma"]),
    ("GIFT University", "Gandhinagar", ["MBA", "B.Tech"]),
    ("Raksha Shakti University", "Gandhinagar", ["BA", "MA", "LLB"]),
    ("IIT Bombay", "Mumbai", ["B.Tech", "M.Tech", "PhD"]),
    ("Mumbai University", "Mumbai", ["BA", "MA", "B.Com", "M.Com", "B.Sc", "M.Sc", "BBA", "MBA", "BCA", "MCA", "LLB", "B.Ed"]),
    ("VJTI", "Mumbai", ["B.Tech", "M.Tech", "Diploma"]),
    ("SPJIMR", "Mumbai", ["MBA"]),
    ("NMIMS University", "Mumbai", ["MBA", "B.Tech", "B.Pharm", "BBA", "B.Com"]),
    ("Tata Institute of Social Sciences (TISS)", "Mumbai", ["MA", "MBA", "PhD"]),
    ("KJ Somaiya College", "Mumbai", ["B.Tech", "MBA", "BCA", "B.Com"]),
    ("DJ Sanghvi College of Engineering", "Mumbai", ["B.Tech", "M.Tech"]),
    ("Pune University (SPPU)", "Pune", ["BA", "MA", "B.Com", "M.Com", "B.Sc", "M.Sc", "BBA", "MBA", "BCA", "MCA", "LLB", "B.Ed", "B.Tech"]),
    ("COEP", "Pune", ["B.Tech", "M.Tech"]),
    ("Symbiosis University", "Pune", ["MBA", "BBA", "BA", "B.Sc", "LLB", "B.Tech"]),
    ("MIT Pune", "Pune", ["B.Tech", "M.Tech", "MBA", "Diploma"]),
    ("VIT Pune", "Pune", ["B.Tech", "M.Tech", "MCA"]),
    ("Fergusson College", "Pune", ["BA", "B.Sc", "B.Com"]),
    ("IISc Bangalore", "Bangalore", ["B.Sc", "M.Sc", "PhD", "M.Tech"]),
    ("Christ University", "Bangalore", ["BA", "B.Com", "BBA", "MBA", "B.Sc", "BCA", "MCA", "LLB"]),
    ("PES University", "Bangalore", ["B.Tech", "M.Tech", "MBA", "MCA"]),
    ("RV College of Engineering", "Bangalore", ["B.Tech", "M.Tech"]),
    ("BMS College of Engineering", "Bangalore", ["B.Tech", "M.Tech", "MBA"]),
    ("Bangalore University", "Bangalore", ["BA", "MA", "B.Com", "M.Com", "B.Sc", "M.Sc", "BBA", "MBA", "LLB", "B.Ed"]),
    ("MSRIT", "Bangalore", ["B.Tech", "M.Tech", "MBA"]),
    ("Jain University", "Bangalore", ["B.Tech", "MBA", "BBA", "B.Com", "BA"]),
    ("IIT Delhi", "Delhi", ["B.Tech", "M.Tech", "PhD", "MBA"]),
    ("Delhi University", "Delhi", ["BA", "MA", "B.Com", "M.Com", "B.Sc", "M.Sc", "BBA", "MBA", "LLB", "B.Ed"]),
    ("JNU", "Delhi", ["BA", "MA", "M.Sc", "PhD"]),
    ("AIIMS Delhi", "Delhi", ["MBBS", "MD", "MS", "PhD"]),
    ("DTU", "Delhi", ["B.Tech", "M.Tech", "MBA"]),
    ("NSIT", "Delhi", ["B.Tech", "M.Tech"]),
    ("IP University", "Delhi", ["B.Tech", "MBA", "BBA", "BCA", "LLB", "B.Ed"]),
    ("Jamia Millia Islamia", "Delhi", ["B.Tech", "BA", "B.Com", "MBA", "LLB", "B.Arch"]),
    ("IIT Hyderabad", "Hyderabad", ["B.Tech", "M.Tech", "PhD"]),
    ("Osmania University", "Hyderabad", ["BA", "MA", "B.Com", "M.Com", "B.Sc", "M.Sc", "B.Tech", "MBA", "LLB"]),
    ("BITS Pilani Hyderabad", "Hyderabad", ["B.Tech", "M.Tech", "PhD"]),
    ("JNTU Hyderabad", "Hyderabad", ["B.Tech", "M.Tech", "MBA", "B.Pharm"]),
    ("University of Hyderabad", "Hyderabad", ["BA", "MA", "B.Sc", "M.Sc", "PhD"]),
    ("IIT Madras", "Chennai", ["B.Tech", "M.Tech", "PhD", "MBA"]),
    ("Anna University", "Chennai", ["B.Tech", "M.Tech", "MBA", "B.Arch"]),
    ("Madras University", "Chennai", ["BA", "MA", "B.Com", "M.Com", "B.Sc", "M.Sc", "MBA", "LLB"]),
    ("SRM University", "Chennai", ["B.Tech", "M.Tech", "MBBS", "BDS", "MBA", "B.Pharm"]),
    ("VIT Chennai", "Chennai", ["B.Tech", "M.Tech", "MBA"]),
    ("Loyola College", "Chennai", ["BA", "B.Com", "B.Sc", "BCA"]),
    ("IIT Kharagpur", "Kolkata", ["B.Tech", "M.Tech", "PhD", "MBA"]),
    ("Jadavpur University", "Kolkata", ["B.Tech", "M.Tech", "BA", "MA", "B.Sc", "PhD"]),
    ("Calcutta University", "Kolkata", ["BA", "MA", "B.Com", "M.Com", "B.Sc", "M.Sc", "LLB"]),
    ("Presidency University", "Kolkata", ["BA", "B.Sc", "MA", "M.Sc"]),
    ("MNIT Jaipur", "Jaipur", ["B.Tech", "M.Tech", "PhD"]),
    ("Rajasthan University", "Jaipur", ["BA", "MA", "B.Com", "M.Com", "B.Sc", "M.Sc", "LLB", "B.Ed"]),
    ("JECRC University", "Jaipur", ["B.Tech", "M.Tech", "MBA", "BCA"]),
    ("Manipal University Jaipur", "Jaipur", ["B.Tech", "MBA", "BBA", "B.Sc", "B.Arch"]),
    ("Poornima University", "Jaipur", ["B.Tech", "MBA", "BBA", "Diploma"]),
    ("IIT Indore", "Indore", ["B.Tech", "M.Tech", "PhD"]),
    ("IIM Indore", "Indore", ["MBA", "PhD"]),
    ("Devi Ahilya University", "Indore", ["BA", "MA", "B.Com", "M.Com", "B.Sc", "M.Sc", "BBA", "MBA", "LLB"]),
    ("Medicaps University", "Indore", ["B.Tech", "M.Tech", "MBA", "B.Pharm"]),
    ("IIT Kanpur", "Lucknow", ["B.Tech", "M.Tech", "PhD", "MBA"]),
    ("Lucknow University", "Lucknow", ["BA", "MA", "B.Com", "M.Com", "B.Sc", "M.Sc", "LLB", "B.Ed"]),
    ("Amity University Lucknow", "Lucknow", ["B.Tech", "MBA", "BBA", "BCA", "B.Arch", "LLB"]),
    ("BBAU", "Lucknow", ["BA", "MA", "B.Sc", "M.Sc", "MBA"]),
    ("Punjab University", "Chandigarh", ["BA", "MA", "B.Com", "M.Com", "B.Sc", "M.Sc", "BBA", "MBA", "LLB", "B.Ed", "B.Tech"]),
    ("PEC Chandigarh", "Chandigarh", ["B.Tech", "M.Tech"]),
    ("Chandigarh University", "Chandigarh", ["B.Tech", "M.Tech", "MBA", "BBA", "BCA", "MCA", "B.Pharm", "LLB"]),
    ("Chitkara University", "Chandigarh", ["B.Tech", "MBA", "BBA", "B.Pharm"]),
    ("St. Xavier's College", "Ahmedabad", ["BA", "B.Sc", "B.Com", "BCA"]),
    ("Children's University", "Gandhinagar", ["B.Ed", "BA"]),
    ("St. Xavier's College Mumbai", "Mumbai", ["BA", "B.Sc", "B.Com", "BMS"]),
]
