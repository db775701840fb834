"""
Symptom catalog
Voice keywords are matched as lower-case substrings of the transcript
"""

from typing import Dict, List

from healthrisk.models import Severity, Symptom


SYMPTOMS: List[Symptom] = [
    Symptom(
        id="fever",
        name={"en": "Fever", "hi": "बुखार", "ml": "പനി", "ta": "காய்ச்சல்", "bn": "জ্বর"},
        description={"en": "Raised body temperature, feeling hot or feverish"},
        category="infectious",
        severity=Severity.MODERATE,
        body_part="whole_body",
        voice_keywords={
            "en": ["fever", "temperature", "hot body"],
            "hi": ["बुखार", "ताप"],
            "ml": ["പനി"],
            "ta": ["காய்ச்சல்"],
            "bn": ["জ্বর"],
            "or": ["ଜ୍ୱର"],
            "ne": ["ज्वरो"],
        },
        related_symptoms=["chills", "headache", "body_pain"],
    ),
    Symptom(
        id="cough",
        name={"en": "Cough", "hi": "खांसी", "ml": "ചുമ", "ta": "இருமல்", "bn": "কাশি"},
        description={"en": "Dry or wet cough"},
        category="respiratory",
        severity=Severity.MILD,
        body_part="chest",
        voice_keywords={
            "en": ["cough"],
            "hi": ["खांसी"],
            "ml": ["ചുമ"],
            "ta": ["இருமல்"],
            "bn": ["কাশি"],
            "ne": ["खोकी"],
        },
        related_symptoms=["sore_throat", "breathing", "fever"],
    ),
    Symptom(
        id="headache",
        name={"en": "Headache", "hi": "सिरदर्द", "ml": "തലവേദന", "ta": "தலைவலி", "bn": "মাথাব্যথা"},
        description={"en": "Pain anywhere in the head"},
        category="neurological",
        severity=Severity.MILD,
        body_part="head",
        voice_keywords={
            "en": ["headache", "head pain", "head hurts"],
            "hi": ["सिरदर्द", "सिर दर्द"],
            "ml": ["തലവേദന"],
            "ta": ["தலைவலி"],
            "bn": ["মাথাব্যথা"],
        },
        related_symptoms=["dizziness", "fever"],
    ),
    Symptom(
        id="body_pain",
        name={"en": "Body Pain", "hi": "बदन दर्द", "ml": "ശരീരവേദന"},
        description={"en": "Aching muscles or general body ache"},
        category="general",
        severity=Severity.MILD,
        body_part="whole_body",
        voice_keywords={
            "en": ["body pain", "body ache", "aching"],
            "hi": ["बदन दर्द", "शरीर में दर्द"],
            "ml": ["ശരീരവേദന"],
        },
        related_symptoms=["fever", "fatigue", "joint_pain"],
    ),
    Symptom(
        id="fatigue",
        name={"en": "Fatigue", "hi": "थकान", "ml": "ക്ഷീണം"},
        description={"en": "Unusual tiredness or weakness"},
        category="general",
        severity=Severity.MILD,
        body_part="whole_body",
        voice_keywords={
            "en": ["tired", "fatigue", "weakness", "exhausted"],
            "hi": ["थकान", "कमजोरी"],
            "ml": ["ക്ഷീണം"],
        },
    ),
    Symptom(
        id="nausea",
        name={"en": "Nausea", "hi": "जी मिचलाना", "ml": "ഓക്കാനം"},
        description={"en": "Feeling like vomiting"},
        category="digestive",
        severity=Severity.MILD,
        body_part="abdomen",
        voice_keywords={
            "en": ["nausea", "nauseous", "feel sick"],
            "hi": ["जी मिचलाना", "मतली"],
            "ml": ["ഓക്കാനം"],
        },
        related_symptoms=["vomiting", "stomach_pain"],
    ),
    Symptom(
        id="vomiting",
        name={"en": "Vomiting", "hi": "उल्टी", "ml": "ഛർദ്ദി"},
        description={"en": "Throwing up food or fluids"},
        category="digestive",
        severity=Severity.MODERATE,
        body_part="abdomen",
        voice_keywords={
            "en": ["vomit", "throwing up"],
            "hi": ["उल्टी"],
            "ml": ["ഛർദ്ദി"],
        },
        related_symptoms=["nausea", "diarrhea"],
    ),
    Symptom(
        id="diarrhea",
        name={"en": "Diarrhea", "hi": "दस्त", "ml": "വയറിളക്കം"},
        description={"en": "Frequent loose or watery stools"},
        category="digestive",
        severity=Severity.MODERATE,
        body_part="abdomen",
        voice_keywords={
            "en": ["diarrhea", "diarrhoea", "loose motion", "loose stool"],
            "hi": ["दस्त"],
            "ml": ["വയറിളക്കം"],
        },
        related_symptoms=["vomiting", "stomach_pain"],
    ),
    Symptom(
        id="stomach_pain",
        name={"en": "Stomach Pain", "hi": "पेट दर्द", "ml": "വയറുവേദന"},
        description={"en": "Pain or cramps in the abdomen"},
        category="digestive",
        severity=Severity.MODERATE,
        body_part="abdomen",
        voice_keywords={
            "en": ["stomach pain", "stomach ache", "abdominal pain", "belly pain"],
            "hi": ["पेट दर्द", "पेट में दर्द"],
            "ml": ["വയറുവേദന"],
        },
    ),
    Symptom(
        id="breathing",
        name={"en": "Breathing Difficulty", "hi": "सांस लेने में तकलीफ", "ml": "ശ്വാസതടസ്സം"},
        description={"en": "Shortness of breath or trouble breathing"},
        category="respiratory",
        severity=Severity.SEVERE,
        body_part="chest",
        voice_keywords={
            "en": ["shortness of breath", "breathless", "difficulty breathing", "can't breathe"],
            "hi": ["सांस लेने में तकलीफ", "सांस फूलना"],
            "ml": ["ശ്വാസതടസ്സം"],
            "ta": ["மூச்சுத் திணறல்"],
        },
        related_symptoms=["chest_pain", "cough", "wheezing"],
    ),
    Symptom(
        id="chest_pain",
        name={"en": "Chest Pain", "hi": "सीने में दर्द", "ml": "നെഞ്ചുവേദന"},
        description={"en": "Pain, pressure or tightness in the chest"},
        category="cardiovascular",
        severity=Severity.SEVERE,
        body_part="chest",
        voice_keywords={
            "en": ["chest pain", "pain in chest", "chest hurts"],
            "hi": ["सीने में दर्द", "छाती में दर्द"],
            "ml": ["നെഞ്ചുവേദന"],
        },
        related_symptoms=["breathing", "excessive_sweating"],
    ),
    Symptom(
        id="wheezing",
        name={"en": "Wheezing", "hi": "घरघराहट", "ml": "ശ്വാസംമുട്ടൽ"},
        description={"en": "Whistling sound while breathing"},
        category="respiratory",
        severity=Severity.MODERATE,
        body_part="chest",
        voice_keywords={"en": ["wheez", "whistling"], "hi": ["घरघराहट"], "ml": ["ശ്വാസംമുട്ടൽ"]},
        related_symptoms=["breathing", "cough"],
    ),
    Symptom(
        id="dizziness",
        name={"en": "Dizziness", "hi": "चक्कर", "ml": "തലകറക്കം"},
        description={"en": "Feeling lightheaded or unsteady"},
        category="neurological",
        severity=Severity.MODERATE,
        body_part="head",
        voice_keywords={
            "en": ["dizzy", "dizziness", "lightheaded"],
            "hi": ["चक्कर"],
            "ml": ["തലകറക്കം"],
        },
    ),
    Symptom(
        id="chills",
        name={"en": "Chills", "hi": "कंपकंपी", "ml": "കുളിര്"},
        description={"en": "Shivering and feeling cold"},
        category="infectious",
        severity=Severity.MILD,
        body_part="whole_body",
        voice_keywords={"en": ["chills", "shivering"], "hi": ["कंपकंपी", "ठंड लगना"], "ml": ["കുളിര്"]},
        related_symptoms=["fever"],
    ),
    Symptom(
        id="joint_pain",
        name={"en": "Joint Pain", "hi": "जोड़ों में दर्द", "ml": "സന്ധിവേദന"},
        description={"en": "Pain or swelling in the joints"},
        category="musculoskeletal",
        severity=Severity.MODERATE,
        body_part="legs",
        voice_keywords={
            "en": ["joint pain", "joints hurt"],
            "hi": ["जोड़ों में दर्द", "जोड़ों का दर्द"],
            "ml": ["സന്ധിവേദന"],
        },
    ),
    Symptom(
        id="skin_rash",
        name={"en": "Skin Rash", "hi": "त्वचा पर दाने", "ml": "തിണർപ്പ്"},
        description={"en": "Red spots, patches or bumps on the skin"},
        category="dermatological",
        severity=Severity.MILD,
        body_part="whole_body",
        voice_keywords={"en": ["rash", "red spots"], "hi": ["दाने", "चकत्ते"], "ml": ["തിണർപ്പ്"]},
        related_symptoms=["itching"],
    ),
    Symptom(
        id="itching",
        name={"en": "Itching", "hi": "खुजली", "ml": "ചൊറിച്ചിൽ"},
        description={"en": "Itchy skin"},
        category="dermatological",
        severity=Severity.MILD,
        body_part="whole_body",
        voice_keywords={"en": ["itch"], "hi": ["खुजली"], "ml": ["ചൊറിച്ചിൽ"]},
        related_symptoms=["skin_rash"],
    ),
    Symptom(
        id="sore_throat",
        name={"en": "Sore Throat", "hi": "गले में खराश", "ml": "തൊണ്ടവേദന"},
        description={"en": "Pain or scratchiness in the throat"},
        category="respiratory",
        severity=Severity.MILD,
        body_part="head",
        voice_keywords={
            "en": ["sore throat", "throat pain"],
            "hi": ["गले में खराश", "गला दर्द"],
            "ml": ["തൊണ്ടവേദന"],
        },
    ),
    Symptom(
        id="runny_nose",
        name={"en": "Runny Nose", "hi": "नाक बहना", "ml": "മൂക്കൊലിപ്പ്"},
        description={"en": "Runny or blocked nose, sneezing"},
        category="respiratory",
        severity=Severity.MILD,
        body_part="head",
        voice_keywords={
            "en": ["runny nose", "blocked nose", "sneez"],
            "hi": ["नाक बहना", "जुकाम"],
            "ml": ["മൂക്കൊലിപ്പ്", "ജലദോഷം"],
        },
    ),
    Symptom(
        id="jaundice",
        name={"en": "Yellow Eyes or Skin", "hi": "पीलिया", "ml": "മഞ്ഞപ്പിത്തം"},
        description={"en": "Yellowing of the eyes or skin"},
        category="digestive",
        severity=Severity.SEVERE,
        body_part="whole_body",
        voice_keywords={
            "en": ["jaundice", "yellow eyes", "yellow skin"],
            "hi": ["पीलिया"],
            "ml": ["മഞ്ഞപ്പിത്തം"],
        },
    ),
    Symptom(
        id="weight_loss",
        name={"en": "Weight Loss", "hi": "वजन कम होना", "ml": "ഭാരം കുറയൽ"},
        description={"en": "Losing weight without trying"},
        category="general",
        severity=Severity.MODERATE,
        body_part="whole_body",
        voice_keywords={"en": ["weight loss", "losing weight"], "hi": ["वजन कम"], "ml": ["ഭാരം കുറ"]},
    ),
    Symptom(
        id="night_sweats",
        name={"en": "Night Sweats", "hi": "रात को पसीना", "ml": "രാത്രി വിയർപ്പ്"},
        description={"en": "Heavy sweating during sleep"},
        category="infectious",
        severity=Severity.MODERATE,
        body_part="whole_body",
        voice_keywords={
            "en": ["night sweat", "sweating at night"],
            "hi": ["रात को पसीना"],
            "ml": ["രാത്രി വിയർപ്പ്"],
        },
    ),
    Symptom(
        id="excessive_sweating",
        name={"en": "Heavy Sweating", "hi": "बहुत पसीना", "ml": "അമിത വിയർപ്പ്"},
        description={"en": "Sweating much more than usual"},
        category="general",
        severity=Severity.MODERATE,
        body_part="whole_body",
        voice_keywords={
            "en": ["sweating a lot", "heavy sweating", "excessive sweating"],
            "hi": ["बहुत पसीना"],
            "ml": ["അമിത വിയർപ്പ്"],
        },
    ),
    Symptom(
        id="blood_in_cough",
        name={"en": "Coughing Blood", "hi": "खांसी में खून", "ml": "ചുമയിൽ രക്തം"},
        description={"en": "Blood in cough or sputum"},
        category="respiratory",
        severity=Severity.CRITICAL,
        body_part="chest",
        voice_keywords={
            "en": ["coughing blood", "blood in cough", "blood in sputum"],
            "hi": ["खांसी में खून"],
            "ml": ["ചുമയിൽ രക്തം"],
        },
        related_symptoms=["cough", "weight_loss"],
    ),
    Symptom(
        id="back_pain",
        name={"en": "Back Pain", "hi": "कमर दर्द", "ml": "നടുവേദന"},
        description={"en": "Pain in the upper or lower back"},
        category="musculoskeletal",
        severity=Severity.MILD,
        body_part="back",
        voice_keywords={
            "en": ["back pain", "backache", "lower back"],
            "hi": ["कमर दर्द", "पीठ दर्द"],
            "ml": ["നടുവേദന"],
        },
        related_symptoms=["muscle_stiffness"],
    ),
    Symptom(
        id="muscle_stiffness",
        name={"en": "Muscle Stiffness", "hi": "मांसपेशियों में अकड़न", "ml": "പേശി മുറുക്കം"},
        description={"en": "Stiff or cramping muscles"},
        category="musculoskeletal",
        severity=Severity.MILD,
        body_part="whole_body",
        voice_keywords={
            "en": ["stiff", "cramp"],
            "hi": ["अकड़न", "ऐंठन"],
            "ml": ["പേശിവലിവ്"],
        },
    ),
    Symptom(
        id="red_eyes",
        name={"en": "Red Eyes", "hi": "आंखें लाल", "ml": "കണ്ണ് ചുവപ്പ്"},
        description={"en": "Redness of the eyes"},
        category="infectious",
        severity=Severity.MILD,
        body_part="head",
        voice_keywords={"en": ["red eyes", "eye redness"], "hi": ["आंखें लाल"], "ml": ["കണ്ണ് ചുവപ്പ്"]},
    ),
    Symptom(
        id="loss_of_appetite",
        name={"en": "Loss of Appetite", "hi": "भूख न लगना", "ml": "വിശപ്പില്ലായ്മ"},
        description={"en": "Not feeling hungry"},
        category="digestive",
        severity=Severity.MILD,
        body_part="abdomen",
        voice_keywords={
            "en": ["no appetite", "loss of appetite", "not hungry"],
            "hi": ["भूख नहीं"],
            "ml": ["വിശപ്പില്ല"],
        },
    ),
    Symptom(
        id="burning_urination",
        name={"en": "Burning Urination", "hi": "पेशाब में जलन", "ml": "മൂത്രത്തിൽ എരിച്ചിൽ"},
        description={"en": "Pain or burning while passing urine"},
        category="infectious",
        severity=Severity.MODERATE,
        body_part="abdomen",
        voice_keywords={
            "en": ["burning urine", "burning while urinating", "painful urination"],
            "hi": ["पेशाब में जलन"],
            "ml": ["മൂത്രത്തിൽ എരിച്ചിൽ"],
        },
    ),
    Symptom(
        id="confusion",
        name={"en": "Confusion", "hi": "भ्रम", "ml": "ആശയക്കുഴപ്പം"},
        description={"en": "Confused or disoriented"},
        category="neurological",
        severity=Severity.SEVERE,
        body_part="head",
        voice_keywords={"en": ["confused", "confusion", "disoriented"], "hi": ["भ्रम"], "ml": ["ആശയക്കുഴപ്പം"]},
    ),
    Symptom(
        id="anxiety",
        name={"en": "Anxiety", "hi": "घबराहट", "ml": "ഉത്കണ്ഠ"},
        description={"en": "Constant worry, restlessness or stress"},
        category="mental_health",
        severity=Severity.MILD,
        body_part="head",
        voice_keywords={"en": ["anxious", "anxiety", "stress"], "hi": ["चिंता", "घबराहट"], "ml": ["ഉത്കണ്ഠ"]},
        related_symptoms=["insomnia"],
    ),
    Symptom(
        id="insomnia",
        name={"en": "Sleeplessness", "hi": "नींद न आना", "ml": "ഉറക്കമില്ലായ്മ"},
        description={"en": "Trouble falling or staying asleep"},
        category="mental_health",
        severity=Severity.MILD,
        body_part="head",
        voice_keywords={
            "en": ["can't sleep", "insomnia", "no sleep"],
            "hi": ["नींद नहीं"],
            "ml": ["ഉറക്കമില്ല"],
        },
        related_symptoms=["anxiety", "fatigue"],
    ),
]

SYMPTOMS_BY_ID: Dict[str, Symptom] = {symptom.id: symptom for symptom in SYMPTOMS}
