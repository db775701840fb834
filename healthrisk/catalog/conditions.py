"""
Condition catalog used by the symptom checker
"""

from typing import Dict, List

from healthrisk.models import Condition, ConditionSeverity, Prevalence, UrgencyLevel


CONDITIONS: List[Condition] = [
    Condition(
        id="acute_respiratory_infection",
        name={"en": "Acute Respiratory Infection", "hi": "तीव्र श्वसन संक्रमण", "ml": "ശ്വാസകോശ അണുബാധ"},
        description={"en": "Short-term infection of the airways, common in crowded living quarters"},
        category="infectious_disease",
        severity=ConditionSeverity.MODERATE,
        common_symptoms=["fever", "cough"],
        rare_symptoms=["breathing"],
        risk_factors=["crowded_housing"],
        recommendations={
            "en": ["Rest and drink plenty of fluids", "Cover your mouth when coughing",
                   "Visit a health centre if fever lasts more than 3 days"],
            "hi": ["आराम करें और खूब पानी पिएं", "खांसते समय मुंह ढकें",
                   "बुखार 3 दिन से ज्यादा रहे तो स्वास्थ्य केंद्र जाएं"],
            "ml": ["വിശ്രമിക്കുക, ധാരാളം വെള്ളം കുടിക്കുക", "ചുമയ്ക്കുമ്പോൾ വായ മൂടുക",
                   "പനി 3 ദിവസത്തിൽ കൂടുതൽ നീണ്ടാൽ ആരോഗ്യ കേന്ദ്രത്തിൽ പോകുക"],
        },
        urgency=UrgencyLevel.MEDIUM,
        prevalence_in_migrants=Prevalence.HIGH,
    ),
    Condition(
        id="common_cold",
        name={"en": "Common Cold", "hi": "सामान्य सर्दी", "ml": "ജലദോഷം"},
        description={"en": "Mild viral infection of the nose and throat"},
        category="infectious_disease",
        severity=ConditionSeverity.MINOR,
        common_symptoms=["runny_nose", "sore_throat", "cough"],
        rare_symptoms=["fever"],
        recommendations={
            "en": ["Rest and drink warm fluids", "Wash hands often"],
            "hi": ["आराम करें और गर्म पेय पिएं", "बार-बार हाथ धोएं"],
            "ml": ["വിശ്രമിക്കുക, ചൂടുവെള്ളം കുടിക്കുക", "കൈകൾ ഇടയ്ക്കിടെ കഴുകുക"],
        },
        urgency=UrgencyLevel.LOW,
        prevalence_in_migrants=Prevalence.HIGH,
    ),
    Condition(
        id="influenza",
        name={"en": "Influenza", "hi": "इन्फ्लूएंजा", "ml": "ഇൻഫ്ലുവൻസ"},
        description={"en": "Viral flu with fever and body ache"},
        category="infectious_disease",
        severity=ConditionSeverity.MODERATE,
        common_symptoms=["fever", "cough", "body_pain", "fatigue", "headache"],
        rare_symptoms=["vomiting"],
        recommendations={
            "en": ["Rest at home and avoid crowded places", "Drink plenty of fluids",
                   "Seek care if breathing becomes difficult"],
            "hi": ["घर पर आराम करें, भीड़ से बचें", "खूब पानी पिएं", "सांस लेने में तकलीफ हो तो डॉक्टर से मिलें"],
        },
        urgency=UrgencyLevel.MEDIUM,
        prevalence_in_migrants=Prevalence.MEDIUM,
    ),
    Condition(
        id="dengue",
        name={"en": "Dengue Fever", "hi": "डेंगू बुखार", "ml": "ഡെങ്കിപ്പനി"},
        description={"en": "Mosquito-borne viral fever, seasonal in Kerala"},
        category="infectious_disease",
        severity=ConditionSeverity.SERIOUS,
        common_symptoms=["fever", "headache", "body_pain", "joint_pain"],
        rare_symptoms=["skin_rash", "vomiting"],
        risk_factors=["stagnant_water", "monsoon"],
        recommendations={
            "en": ["Get a blood test at the nearest health centre", "Drink plenty of fluids",
                   "Avoid painkillers other than paracetamol", "Use mosquito nets"],
            "hi": ["नजदीकी स्वास्थ्य केंद्र में खून की जांच कराएं", "खूब पानी पिएं",
                   "पैरासिटामोल के अलावा दर्द निवारक न लें", "मच्छरदानी का प्रयोग करें"],
            "ml": ["അടുത്തുള്ള ആരോഗ്യ കേന്ദ്രത്തിൽ രക്തപരിശോധന നടത്തുക", "ധാരാളം വെള്ളം കുടിക്കുക",
                   "പാരസെറ്റമോൾ അല്ലാതെ വേദനസംഹാരികൾ ഒഴിവാക്കുക", "കൊതുകുവല ഉപയോഗിക്കുക"],
        },
        urgency=UrgencyLevel.HIGH,
        prevalence_in_migrants=Prevalence.HIGH,
    ),
    Condition(
        id="malaria",
        name={"en": "Malaria", "hi": "मलेरिया", "ml": "മലമ്പനി"},
        description={"en": "Parasitic infection spread by mosquitoes"},
        category="infectious_disease",
        severity=ConditionSeverity.SERIOUS,
        common_symptoms=["fever", "chills", "headache", "excessive_sweating"],
        rare_symptoms=["vomiting", "jaundice"],
        recommendations={
            "en": ["Get a malaria blood test", "Complete the full course of medicine", "Sleep under a mosquito net"],
            "hi": ["मलेरिया की खून जांच कराएं", "दवा का पूरा कोर्स करें", "मच्छरदानी में सोएं"],
        },
        urgency=UrgencyLevel.HIGH,
        prevalence_in_migrants=Prevalence.MEDIUM,
    ),
    Condition(
        id="leptospirosis",
        name={"en": "Leptospirosis", "hi": "लेप्टोस्पायरोसिस", "ml": "എലിപ്പനി"},
        description={"en": "Bacterial infection from flood water and soil, common after monsoon"},
        category="infectious_disease",
        severity=ConditionSeverity.SERIOUS,
        common_symptoms=["fever", "body_pain", "headache", "red_eyes"],
        rare_symptoms=["jaundice"],
        risk_factors=["flood_water", "agriculture", "sanitation_work"],
        recommendations={
            "en": ["See a doctor immediately if you worked in water or mud",
                   "Wear boots and gloves in wet fields"],
            "ml": ["വെള്ളത്തിലോ ചെളിയിലോ ജോലി ചെയ്തിട്ടുണ്ടെങ്കിൽ ഉടൻ ഡോക്ടറെ കാണുക",
                   "നനഞ്ഞ വയലുകളിൽ ബൂട്ടും കയ്യുറയും ധരിക്കുക"],
        },
        urgency=UrgencyLevel.HIGH,
        prevalence_in_migrants=Prevalence.MEDIUM,
    ),
    Condition(
        id="tuberculosis",
        name={"en": "Tuberculosis", "hi": "तपेदिक (टीबी)", "ml": "ക്ഷയരോഗം"},
        description={"en": "Long-lasting bacterial lung infection"},
        category="infectious_disease",
        severity=ConditionSeverity.SERIOUS,
        common_symptoms=["cough", "fever", "weight_loss", "night_sweats"],
        rare_symptoms=["blood_in_cough"],
        risk_factors=["crowded_housing"],
        recommendations={
            "en": ["Get a free sputum test at a government health centre",
                   "Cover your mouth when coughing", "Treatment is free and must be completed"],
            "hi": ["सरकारी स्वास्थ्य केंद्र में मुफ्त बलगम जांच कराएं", "खांसते समय मुंह ढकें",
                   "इलाज मुफ्त है और पूरा करना जरूरी है"],
        },
        urgency=UrgencyLevel.HIGH,
        prevalence_in_migrants=Prevalence.HIGH,
    ),
    Condition(
        id="pneumonia",
        name={"en": "Pneumonia", "hi": "निमोनिया", "ml": "ന്യുമോണിയ"},
        description={"en": "Infection of the lungs"},
        category="infectious_disease",
        severity=ConditionSeverity.SERIOUS,
        common_symptoms=["fever", "cough", "breathing", "chest_pain"],
        rare_symptoms=["confusion"],
        recommendations={
            "en": ["See a doctor today", "Go to a hospital if breathing gets worse"],
            "hi": ["आज ही डॉक्टर को दिखाएं", "सांस की तकलीफ बढ़े तो अस्पताल जाएं"],
        },
        urgency=UrgencyLevel.HIGH,
        prevalence_in_migrants=Prevalence.MEDIUM,
    ),
    Condition(
        id="gastroenteritis",
        name={"en": "Gastroenteritis", "hi": "आंत्रशोथ", "ml": "ഉദരരോഗം"},
        description={"en": "Stomach infection from contaminated food or water"},
        category="infectious_disease",
        severity=ConditionSeverity.MODERATE,
        common_symptoms=["diarrhea", "vomiting", "stomach_pain", "nausea"],
        rare_symptoms=["fever"],
        risk_factors=["unsafe_water"],
        recommendations={
            "en": ["Drink ORS solution after every loose stool", "Drink boiled or bottled water",
                   "Seek care if you cannot keep fluids down"],
            "hi": ["हर दस्त के बाद ओआरएस घोल पिएं", "उबला या बोतलबंद पानी पिएं",
                   "पानी भी न टिके तो डॉक्टर से मिलें"],
            "ml": ["ഓരോ തവണയും ഒആർഎസ് ലായനി കുടിക്കുക", "തിളപ്പിച്ച വെള്ളം കുടിക്കുക"],
        },
        urgency=UrgencyLevel.MEDIUM,
        prevalence_in_migrants=Prevalence.HIGH,
    ),
    Condition(
        id="typhoid",
        name={"en": "Typhoid Fever", "hi": "टाइफाइड", "ml": "ടൈഫോയ്ഡ്"},
        description={"en": "Bacterial infection spread through contaminated food and water"},
        category="infectious_disease",
        severity=ConditionSeverity.SERIOUS,
        common_symptoms=["fever", "stomach_pain", "headache", "loss_of_appetite"],
        rare_symptoms=["diarrhea"],
        recommendations={"en": ["Get a blood test for typhoid", "Eat freshly cooked food only"]},
        urgency=UrgencyLevel.HIGH,
        prevalence_in_migrants=Prevalence.MEDIUM,
    ),
    Condition(
        id="hepatitis_a",
        name={"en": "Hepatitis A", "hi": "हेपेटाइटिस ए", "ml": "ഹെപ്പറ്റൈറ്റിസ് എ"},
        description={"en": "Liver infection spread through unsafe food and water"},
        category="infectious_disease",
        severity=ConditionSeverity.SERIOUS,
        common_symptoms=["jaundice", "fatigue", "nausea", "loss_of_appetite"],
        rare_symptoms=["fever"],
        recommendations={"en": ["See a doctor for a liver test", "Avoid alcohol", "Rest and eat light food"]},
        urgency=UrgencyLevel.HIGH,
        prevalence_in_migrants=Prevalence.MEDIUM,
    ),
    Condition(
        id="heat_exhaustion",
        name={"en": "Heat Exhaustion", "hi": "गर्मी से थकावट", "ml": "സൂര്യാഘാതം"},
        description={"en": "Overheating from working in hot conditions"},
        category="occupational_disease",
        severity=ConditionSeverity.SERIOUS,
        common_symptoms=["excessive_sweating", "dizziness", "headache", "fatigue"],
        rare_symptoms=["confusion", "nausea"],
        risk_factors=["outdoor_work"],
        recommendations={
            "en": ["Move to a cool, shaded place", "Drink water with salt and sugar",
                   "Go to hospital if confused or fainting"],
            "hi": ["ठंडी छायादार जगह पर जाएं", "नमक-चीनी वाला पानी पिएं", "बेहोशी या भ्रम हो तो अस्पताल जाएं"],
            "ml": ["തണലുള്ള സ്ഥലത്തേക്ക് മാറുക", "ഉപ്പും പഞ്ചസാരയും ചേർത്ത വെള്ളം കുടിക്കുക"],
        },
        urgency=UrgencyLevel.HIGH,
        prevalence_in_migrants=Prevalence.HIGH,
    ),
    Condition(
        id="heart_attack",
        name={"en": "Possible Heart Attack", "hi": "संभावित दिल का दौरा", "ml": "ഹൃദയാഘാതം"},
        description={"en": "Blocked blood flow to the heart"},
        category="chronic_disease",
        severity=ConditionSeverity.CRITICAL,
        common_symptoms=["chest_pain", "breathing", "excessive_sweating"],
        rare_symptoms=["dizziness", "nausea"],
        recommendations={
            "en": ["Call 108 for an ambulance now", "Stop all activity and sit down"],
            "hi": ["तुरंत 108 पर एम्बुलेंस बुलाएं", "सभी काम रोककर बैठ जाएं"],
            "ml": ["ഉടൻ 108 വിളിക്കുക", "എല്ലാ പ്രവൃത്തികളും നിർത്തി ഇരിക്കുക"],
        },
        urgency=UrgencyLevel.EMERGENCY,
        prevalence_in_migrants=Prevalence.LOW,
    ),
    Condition(
        id="asthma",
        name={"en": "Asthma", "hi": "दमा", "ml": "ആസ്ത്മ"},
        description={"en": "Narrowing of the airways, often triggered by dust"},
        category="chronic_disease",
        severity=ConditionSeverity.MODERATE,
        common_symptoms=["wheezing", "breathing", "cough"],
        rare_symptoms=["chest_pain"],
        risk_factors=["dust_exposure"],
        recommendations={"en": ["Avoid dust and smoke", "Use a mask at dusty work sites", "See a doctor for an inhaler"]},
        urgency=UrgencyLevel.MEDIUM,
        prevalence_in_migrants=Prevalence.MEDIUM,
    ),
    Condition(
        id="scabies",
        name={"en": "Scabies / Skin Infection", "hi": "खुजली रोग", "ml": "ചൊറി"},
        description={"en": "Contagious itchy skin infection spread in shared bedding"},
        category="preventable",
        severity=ConditionSeverity.MINOR,
        common_symptoms=["itching", "skin_rash"],
        recommendations={
            "en": ["Wash bedding and clothes in hot water", "Get medicated cream from a health centre"],
            "hi": ["बिस्तर और कपड़े गर्म पानी में धोएं", "स्वास्थ्य केंद्र से दवा वाली क्रीम लें"],
        },
        urgency=UrgencyLevel.LOW,
        prevalence_in_migrants=Prevalence.HIGH,
    ),
    Condition(
        id="urinary_tract_infection",
        name={"en": "Urinary Tract Infection", "hi": "मूत्र मार्ग संक्रमण", "ml": "മൂത്രാശയ അണുബാധ"},
        description={"en": "Infection of the bladder or urinary tract"},
        category="infectious_disease",
        severity=ConditionSeverity.MODERATE,
        common_symptoms=["burning_urination", "stomach_pain"],
        rare_symptoms=["fever"],
        recommendations={"en": ["Drink more water", "See a doctor for a urine test"]},
        urgency=UrgencyLevel.MEDIUM,
        prevalence_in_migrants=Prevalence.MEDIUM,
    ),
    Condition(
        id="musculoskeletal_strain",
        name={"en": "Muscle and Back Strain", "hi": "मांसपेशी और कमर खिंचाव", "ml": "പേശി വലിവ്"},
        description={"en": "Strain from lifting and repetitive physical work"},
        category="occupational_disease",
        severity=ConditionSeverity.MINOR,
        common_symptoms=["back_pain", "muscle_stiffness"],
        rare_symptoms=["joint_pain"],
        risk_factors=["heavy_lifting"],
        recommendations={"en": ["Rest the affected area", "Lift with your legs, not your back"]},
        urgency=UrgencyLevel.LOW,
        prevalence_in_migrants=Prevalence.HIGH,
    ),
    Condition(
        id="stress_anxiety",
        name={"en": "Stress and Anxiety", "hi": "तनाव और चिंता", "ml": "മാനസിക സമ്മർദ്ദം"},
        description={"en": "Emotional strain from work, debt or being away from family"},
        category="mental_health",
        severity=ConditionSeverity.MINOR,
        common_symptoms=["anxiety", "insomnia"],
        rare_symptoms=["fatigue", "headache"],
        recommendations={"en": ["Talk to someone you trust", "Call the free mental health helpline 14416"]},
        urgency=UrgencyLevel.LOW,
        prevalence_in_migrants=Prevalence.MEDIUM,
    ),
]

CONDITIONS_BY_ID: Dict[str, Condition] = {condition.id: condition for condition in CONDITIONS}
