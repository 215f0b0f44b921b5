# (code, name_ar, name_en, default shipping price in DZD)
ALGERIAN_WILAYAS = [
    (1, "أدرار", "Adrar", 1200),
    (2, "الشلف", "Chlef", 600),
    (3, "الأغواط", "Laghouat", 800),
    (4, "أم البواقي", "Oum El Bouaghi", 700),
    (5, "باتنة", "Batna", 700),
    (6, "بجاية", "Bejaia", 600),
    (7, "بسكرة", "Biskra", 800),
    (8, "بشار", "Bechar", 1000),
    (9, "البليدة", "Blida", 400),
    (10, "البويرة", "Bouira", 500),
    (11, "تمنراست", "Tamanrasset", 1500),
    (12, "تبسة", "Tebessa", 800),
    (13, "تلمسان", "Tlemcen", 700),
    (14, "تيارت", "Tiaret", 700),
    (15, "تيزي وزو", "Tizi Ouzou", 500),
    (16, "الجزائر", "Algiers", 400),
    (17, "الجلفة", "Djelfa", 800),
    (18, "جيجل", "Jijel", 700),
    (19, "سطيف", "Setif", 600),
    (20, "سعيدة", "Saida", 800),
    (21, "سكيكدة", "Skikda", 700),
    (22, "سيدي بلعباس", "Sidi Bel Abbes", 700),
    (23, "عنابة", "Annaba", 700),
    (24, "قالمة", "Guelma", 700),
    (25, "قسنطينة", "Constantine", 600),
    (26, "المدية", "Medea", 600),
    (27, "مستغانم", "Mostaganem", 700),
    (28, "المسيلة", "M'Sila", 700),
    (29, "معسكر", "Mascara", 700),
    (30, "ورقلة", "Ouargla", 900),
    (31, "وهران", "Oran", 600),
    (32, "البيض", "El Bayadh", 900),
    (33, "إليزي", "Illizi", 1500),
    (34, "برج بوعريريج", "Bordj Bou Arreridj", 600),
    (35, "بومرداس", "Boumerdes", 500),
    (36, "الطارف", "El Tarf", 800),
    (37, "تندوف", "Tindouf", 1500),
    (38, "تيسمسيلت", "Tissemsilt", 700),
    (39, "الوادي", "El Oued", 900),
    (40, "خنشلة", "Khenchela", 800),
    (41, "سوق أهراس", "Souk Ahras", 800),
    (42, "تيبازة", "Tipaza", 500),
    (43, "ميلة", "Mila", 700),
    (44, "عين الدفلى", "Ain Defla", 600),
    (45, "النعامة", "Naama", 900),
    (46, "عين تموشنت", "Ain Temouchent", 700),
    (47, "غرداية", "Ghardaia", 900),
    (48, "غليزان", "Relizane", 700),
    (49, "تيميمون", "Timimoun", 1300),
    (50, "برج باجي مختار", "Bordj Badji Mokhtar", 1500),
    (51, "أولاد جلال", "Ouled Djellal", 900),
    (52, "بني عباس", "Beni Abbes", 1200),
    (53, "عين صالح", "In Salah", 1400),
    (54, "عين قزام", "In Guezzam", 1500),
    (55, "تقرت", "Touggourt", 900),
    (56, "جانت", "Djanet", 1500),
    (57, "المغير", "El M'Ghair", 900),
    (58, "المنيعة", "El Meniaa", 1100),
]

DEMO_CATEGORIES = [
    {"name_ar": "تاريخ", "name_en": "History", "slug": "history"},
    {"name_ar": "أدب", "name_en": "Literature", "slug": "literature"},
    {"name_ar": "رواية", "name_en": "Fiction", "slug": "fiction"},
    {"name_ar": "دين", "name_en": "Religion", "slug": "religion"},
    {"name_ar": "علوم", "name_en": "Science", "slug": "science"},
]

DEMO_BOOKS = [
    {
        "title_ar": "مقدمة ابن خلدون",
        "title_en": "The Muqaddimah",
        "author": "Ibn Khaldun",
        "description_ar": "كتاب العبر وديوان المبتدأ والخبر في أيام العرب والعجم والبربر.",
        "description_en": "The most important Islamic history of the premodern world.",
        "price": 2500,
        "category": "History",
        "category_slug": "history",
        "language": "both",
        "isbn": "978-0691174954",
        "stock": 15,
    },
    {
        "title_ar": "ألف ليلة وليلة",
        "title_en": "One Thousand and One Nights",
        "author": "Unknown",
        "description_ar": "مجموعة قصصية تراثية من الشرق الأوسط.",
        "description_en": "A collection of Middle Eastern folk tales compiled during the Islamic Golden Age.",
        "price": 3000,
        "category": "Literature",
        "category_slug": "literature",
        "language": "ar",
        "isbn": "978-1234567890",
        "stock": 10,
    },
    {
        "title_ar": "البؤساء",
        "title_en": "Les Miserables",
        "author": "Victor Hugo",
        "description_ar": "رواية فرنسية تاريخية من تأليف فيكتور هوجو.",
        "description_en": "A French historical novel by Victor Hugo.",
        "price": 1800,
        "category": "Fiction",
        "category_slug": "fiction",
        "language": "both",
        "isbn": "978-0451419439",
        "stock": 8,
    },
]

DEMO_USER = {"email": "user@example.com", "password": "user123", "name": "Test User"}
