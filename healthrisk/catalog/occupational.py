"""
Occupational health reference data
Conditions, industry hazard profiles and Kerala regional risk factors
"""

from typing import Dict, List, Tuple

from healthrisk.occupational.models import (
    ConditionCategory,
    ExposureLevel,
    Industry,
    OccupationalCondition,
    PrognosisLevel,
    RiskFactorType,
    RiskSeverity,
)


OCCUPATIONAL_CONDITIONS: List[OccupationalCondition] = [
    OccupationalCondition(
        id="back_strain",
        name={"en": "Occupational Back Strain", "hi": "व्यावसायिक पीठ तनाव", "ml": "തൊഴിൽപരമായ നട് വലിവ്"},
        description={
            "en": "Musculoskeletal injury caused by heavy lifting, poor posture, or repetitive movements at work",
        },
        category=ConditionCategory.MUSCULOSKELETAL,
        common_industries=[Industry.CONSTRUCTION, Industry.MANUFACTURING, Industry.AGRICULTURE, Industry.TRANSPORTATION],
        risk_factors=[RiskFactorType.PHYSICAL, RiskFactorType.ERGONOMIC],
        symptoms=["back_pain", "muscle_stiffness", "limited_mobility"],
        prevention={
            "en": ["Use proper lifting techniques", "Take regular breaks", "Use mechanical aids", "Maintain good posture"],
            "hi": ["उचित उठाने की तकनीक का उपयोग करें", "नियमित ब्रेक लें", "यांत्रिक सहायता का उपयोग करें",
                   "अच्छी मुद्रा बनाए रखें"],
            "ml": ["ശരിയായ ഉയർത്തൽ സാങ്കേതികതകൾ ഉപയോഗിക്കുക", "പതിവായി വിശ്രമിക്കുക",
                   "യാന്ത്രിക സഹായങ്ങൾ ഉപയോഗിക്കുക", "നല്ല സ്ഥിതി നിലനിർത്തുക"],
        },
        treatment={"en": ["Rest and ice application", "Physical therapy", "Pain management",
                          "Ergonomic workplace modifications"]},
        prognosis=PrognosisLevel.GOOD,
        prevalence_rate=0.25,
    ),
    OccupationalCondition(
        id="respiratory_disease",
        name={"en": "Occupational Respiratory Disease", "hi": "व्यावसायिक श्वसन रोग",
              "ml": "തൊഴിൽപരമായ ശ്വാസകോശ രോഗം"},
        description={
            "en": "Lung diseases caused by inhaling harmful particles, chemicals, or biological agents at work",
        },
        category=ConditionCategory.RESPIRATORY,
        common_industries=[Industry.CONSTRUCTION, Industry.MINING, Industry.MANUFACTURING, Industry.AGRICULTURE],
        risk_factors=[RiskFactorType.CHEMICAL, RiskFactorType.PHYSICAL, RiskFactorType.BIOLOGICAL],
        symptoms=["cough", "breathing", "chest_tightness", "wheezing"],
        prevention={
            "en": ["Use proper respiratory protection", "Ensure adequate ventilation", "Regular health screenings",
                   "Avoid dust and fume exposure"],
            "hi": ["उचित श्वसन सुरक्षा का उपयोग करें", "पर्याप्त वेंटिलेशन सुनिश्चित करें", "नियमित स्वास्थ्य जांच",
                   "धूल और धुएं के संपर्क से बचें"],
            "ml": ["ശരിയായ ശ്വാസകോശ സംരക്ഷണം ഉപയോഗിക്കുക", "മതിയായ വായു സഞ്ചാരം ഉറപ്പാക്കുക",
                   "പതിവ് ആരോഗ്യ പരിശോധനകൾ", "പൊടിയും പുകയും ഒഴിവാക്കുക"],
        },
        treatment={"en": ["Remove from exposure", "Bronchodilators", "Anti-inflammatory medication",
                          "Pulmonary rehabilitation"]},
        prognosis=PrognosisLevel.FAIR,
        prevalence_rate=0.15,
    ),
    OccupationalCondition(
        id="heat_exhaustion",
        name={"en": "Heat-Related Illness", "hi": "गर्मी संबंधी बीमारी", "ml": "ചൂട് ബന്ധപ്പെട്ട രോഗം"},
        description={
            "en": "Health problems caused by prolonged exposure to high temperatures and humidity in work environments",
        },
        category=ConditionCategory.CARDIOVASCULAR,
        common_industries=[Industry.CONSTRUCTION, Industry.AGRICULTURE, Industry.MANUFACTURING, Industry.TRANSPORTATION],
        risk_factors=[RiskFactorType.ENVIRONMENTAL, RiskFactorType.PHYSICAL],
        symptoms=["excessive_sweating", "fatigue", "nausea", "headache", "dizziness"],
        prevention={
            "en": ["Drink plenty of water", "Take frequent breaks", "Wear light clothing", "Avoid peak heat hours"],
            "hi": ["भरपूर पानी पिएं", "बार-बार आराम करें", "हल्के कपड़े पहनें", "अधिकतम गर्मी के घंटों से बचें"],
            "ml": ["ധാരാളം വെള്ളം കുടിക്കുക", "പതിവായി വിശ്രമിക്കുക", "ലഘു വസ്ത്രങ്ങൾ ധരിക്കുക",
                   "ഏറ്റവും ചൂടുള്ള സമയം ഒഴിവാക്കുക"],
        },
        treatment={"en": ["Move to cool place", "Remove excess clothing", "Apply cool water",
                          "Seek immediate medical attention"]},
        prognosis=PrognosisLevel.EXCELLENT,
        prevalence_rate=0.20,
        acute=True,
    ),
    OccupationalCondition(
        id="contact_dermatitis",
        name={"en": "Occupational Contact Dermatitis", "hi": "व्यावसायिक त्वचा रोग", "ml": "തൊഴിൽപരമായ ത്വക്ക് രോഗം"},
        description={
            "en": "Skin inflammation from cement, fish processing, pesticides or constant wet work",
        },
        category=ConditionCategory.DERMATOLOGICAL,
        common_industries=[Industry.CONSTRUCTION, Industry.FISHING, Industry.FOOD_PROCESSING, Industry.TEXTILES],
        risk_factors=[RiskFactorType.CHEMICAL, RiskFactorType.BIOLOGICAL],
        symptoms=["itching", "skin_rash"],
        prevention={
            "en": ["Wear waterproof gloves", "Wash skin after handling cement or chemicals",
                   "Use moisturising cream after work"],
            "hi": ["जलरोधी दस्ताने पहनें", "सीमेंट या रसायन छूने के बाद त्वचा धोएं"],
        },
        treatment={"en": ["Avoid the irritant", "Medicated skin cream"]},
        prognosis=PrognosisLevel.GOOD,
        prevalence_rate=0.12,
    ),
]

OCCUPATIONAL_CONDITIONS_BY_ID: Dict[str, OccupationalCondition] = {
    condition.id: condition for condition in OCCUPATIONAL_CONDITIONS
}

# (type, name, severity, exposure) per industry
INDUSTRY_RISK_FACTORS: Dict[Industry, List[Tuple[RiskFactorType, str, RiskSeverity, ExposureLevel]]] = {
    Industry.CONSTRUCTION: [
        (RiskFactorType.PHYSICAL, "Heavy lifting and manual handling", RiskSeverity.HIGH, ExposureLevel.HIGH),
        (RiskFactorType.ENVIRONMENTAL, "Extreme weather exposure", RiskSeverity.MODERATE, ExposureLevel.HIGH),
        (RiskFactorType.CHEMICAL, "Dust and silica exposure", RiskSeverity.HIGH, ExposureLevel.MODERATE),
    ],
    Industry.FISHING: [
        (RiskFactorType.PHYSICAL, "Repetitive motions and strain", RiskSeverity.MODERATE, ExposureLevel.HIGH),
        (RiskFactorType.ENVIRONMENTAL, "Cold and wet conditions", RiskSeverity.MODERATE, ExposureLevel.EXTREME),
    ],
    Industry.MANUFACTURING: [
        (RiskFactorType.CHEMICAL, "Industrial chemical exposure", RiskSeverity.HIGH, ExposureLevel.MODERATE),
        (RiskFactorType.PHYSICAL, "Noise and vibration", RiskSeverity.MODERATE, ExposureLevel.HIGH),
    ],
    Industry.AGRICULTURE: [
        (RiskFactorType.CHEMICAL, "Pesticide and herbicide exposure", RiskSeverity.HIGH, ExposureLevel.MODERATE),
        (RiskFactorType.BIOLOGICAL, "Zoonotic disease exposure", RiskSeverity.MODERATE, ExposureLevel.MODERATE),
    ],
    Industry.TEXTILES: [],
    Industry.HOSPITALITY: [],
    Industry.DOMESTIC_WORK: [],
    Industry.TRANSPORTATION: [],
    Industry.FOOD_PROCESSING: [],
    Industry.MINING: [],
    Industry.OIL_GAS: [],
}

KERALA_ENVIRONMENTAL_FACTORS: Dict[str, float] = {
    "monsoon_season": 1.3,
    "coastal_areas": 1.2,
    "industrial_zones": 1.4,
    "rural_areas": 1.1,
    "urban_heat_islands": 1.25,
}

# Industries exposed to each regional factor
KERALA_FACTOR_INDUSTRIES: Dict[str, Tuple[Industry, ...]] = {
    "monsoon_season": (Industry.CONSTRUCTION, Industry.AGRICULTURE),
    "coastal_areas": (Industry.FISHING, Industry.CONSTRUCTION),
    "industrial_zones": (Industry.MANUFACTURING, Industry.TEXTILES),
}

ALERT_MESSAGES: Dict[str, str] = {
    "en": "High risk detected for {name}. Risk score: {score}%",
    "hi": "{name} के लिए उच्च जोखिम का पता चला। जोखिम स्कोर: {score}%",
    "ml": "{name} നായുള്ള ഉയർന്ന റിസ്ക് കണ്ടെത്തി. റിസ്ക് സ്കോർ: {score}%",
    "bn": "{name} এর জন্য উচ্চ ঝুঁকি সনাক্ত করা হয়েছে। ঝুঁকি স্কোর: {score}%",
    "or": "{name} ପାଇଁ ଉଚ୍ଚ ବିପଦ ଚିହ୍ନଟ ହୋଇଛି। ବିପଦ ସ୍କୋର: {score}%",
    "ta": "{name} க்கான உயர் ஆபத்து கண்டறியப்பட்டது. ஆபத்து மதிப்பெண்: {score}%",
    "ne": "{name} को लागि उच्च जोखिम पत्ता लाग्यो। जोखिम स्कोर: {score}%",
}
