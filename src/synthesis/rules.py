"""
Synthesis Rule Tables

Per-industry constants used by the report synthesizer. These are product
configuration, not algorithmic contracts: values may be tuned without
touching the derivation code.

Every table is keyed by IndustryProfile.id. Unmapped ids fall back to the
documented defaults (empty lists, 1.0 multiplier, 6 months).
"""

from typing import Dict, List, Tuple


# ============================================================================
# KEYWORD CATEGORY CAPS
# ============================================================================

MAX_TECHNOLOGY_KEYWORDS = 8
MAX_BUSINESS_KEYWORDS = 8
MAX_COMPLIANCE_KEYWORDS = 6


# ============================================================================
# RECOMMENDATIONS
# ============================================================================

# (trigger substrings, high items, medium items). An empty trigger tuple
# means the rule always applies.
RecommendationRule = Tuple[Tuple[str, ...], List[str], List[str]]

RECOMMENDATION_RULES: Dict[str, List[RecommendationRule]] = {
    "ecommerce": [
        (("mobile", "conversion"), [
            "Progressive Web App (PWA) for a better mobile experience",
            "Mobile-first design with touch-optimized navigation",
        ], []),
        (("payment", "checkout"), [
            "Integrated payment solutions (Stripe, PayPal, Klarna)",
        ], [
            "One-click checkout for returning customers",
        ]),
        (("performance", "speed"), [
            "CDN rollout for global performance",
        ], [
            "Image optimization with WebP/AVIF",
        ]),
    ],
    "healthcare": [
        ((), [
            "End-to-end encryption for patient data",
            "HIPAA-compliant data storage and processing",
            "Audit logging for all critical operations",
        ], [
            "FHIR standard for data interoperability",
            "Multi-factor authentication for all users",
        ]),
    ],
    "fintech": [
        ((), [
            "PCI-DSS Level 1 compliance for payment processing",
            "Real-time fraud detection with machine learning",
            "Strong Customer Authentication (SCA) per PSD2",
        ], [
            "Tokenization of sensitive financial data",
            "API rate limiting and DDoS protection",
        ]),
    ],
    "manufacturing": [
        ((), [
            "MQTT protocol for IoT sensor communication",
            "Edge computing for latency-critical workloads",
        ], [
            "Predictive maintenance with machine learning",
            "InfluxDB for sensor time-series data",
        ]),
    ],
    "automotive": [
        ((), [
            "ISO 26262 functional safety process from day one",
            "Secure over-the-air update pipeline with signed artifacts",
        ], [
            "AUTOSAR-compliant software architecture",
            "Hardware-in-the-loop test automation",
        ]),
    ],
    "it": [
        ((), [
            "Kubernetes production readiness (resource limits, health checks)",
            "Rate limiting and fallback strategy for external AI APIs",
            "End-to-end encryption for sensitive documents",
        ], [
            "Elasticsearch index and query tuning",
            "Monitoring with metrics and custom health checks",
        ]),
    ],
}

LOW_PRIORITY_RECOMMENDATIONS: Dict[str, List[str]] = {
    "ecommerce": [
        "A/B testing framework for conversion optimization",
        "Personalized product recommendations with ML",
    ],
    "healthcare": ["Telemedicine integration for remote consultations"],
    "fintech": ["Blockchain integration for transparency"],
    "manufacturing": [
        "Digital twin for production simulation",
        "Automated quality control with computer vision",
    ],
    "automotive": ["Digital twin of the vehicle E/E architecture"],
    "it": [
        "API versioning strategy with backward compatibility",
        "Generated API documentation portal (OpenAPI)",
    ],
}


# ============================================================================
# COMPLIANCE
# ============================================================================

_DATA_PROTECTION_KEYWORDS = ["datenschutz", "privacy", "cookie", "consent", "gdpr", "dsgvo"]
_DATA_PROTECTION_REQUIREMENTS = [
    "Cookie Consent Management",
    "Data Anonymization",
    "Right to be Forgotten",
]

REGULATION_KEYWORDS: Dict[str, List[str]] = {
    "DSGVO": _DATA_PROTECTION_KEYWORDS,
    "GDPR": _DATA_PROTECTION_KEYWORDS,
    "HIPAA": ["patient", "medical", "health", "phi"],
    "PCI-DSS": ["payment", "card", "transaction", "credit"],
    "ISO 9001": ["quality", "process", "documentation"],
    "PSD2": ["payment", "banking", "authentication"],
    "ISO 27001": ["isms", "information security", "risk assessment"],
    "ISO 26262": ["functional safety", "asil", "safety case"],
}

REGULATION_REQUIREMENTS: Dict[str, List[str]] = {
    "DSGVO": _DATA_PROTECTION_REQUIREMENTS,
    "GDPR": _DATA_PROTECTION_REQUIREMENTS,
    "HIPAA": ["Administrative Safeguards", "Physical Safeguards", "Technical Safeguards"],
    "PCI-DSS": ["Secure Network", "Cardholder Data Protection", "Vulnerability Management"],
    "ISO 9001": ["Quality Management System", "Process Documentation", "Continuous Improvement"],
    "PSD2": ["Strong Customer Authentication", "Open Banking APIs", "Transaction Monitoring"],
    "ISO 27001": ["Information Security Policy", "Risk Treatment Plan", "Access Control"],
    "ISO 26262": ["Hazard Analysis and Risk Assessment", "Safety Goals", "Safety Case"],
}


# ============================================================================
# RISK
# ============================================================================

SECURITY_RISK_BASE = 3
COMPLIANCE_RISK_BASE = 4
TECHNICAL_RISK_BASE = 3
RISK_MIN = 1
RISK_MAX = 10
RISK_ALERT_THRESHOLD = 6  # scores above this trigger mitigations

HIGH_SECURITY_INDUSTRIES = frozenset({"healthcare", "fintech"})
SECURITY_MENTIONS = ("encryption", "security")
COMPLIANCE_MENTIONS = ("compliance", "audit")
MODERN_TECH_MENTIONS = ("kubernetes", "docker", "microservices", "cloud")
LARGE_DOCUMENT_CHARS = 10000

RISK_MITIGATIONS: Dict[str, List[str]] = {
    "security": [
        "External security audit",
        "Penetration testing before go-live",
    ],
    "compliance": [
        "Compliance review by legal experts",
        "Schedule recurring compliance audits",
    ],
    "technical": [
        "Proof of concept for critical components",
        "Experienced architects for system design",
    ],
}


# ============================================================================
# BUDGET
# ============================================================================

BASE_BUDGET = 100000  # EUR
MAX_BUDGET_COMPLEXITY = 3.0
BUDGET_COMPLEXITY_CHARS = 10000
BUDGET_MIN_FACTOR = 0.8
BUDGET_MAX_FACTOR = 1.3

INDUSTRY_BUDGET_MULTIPLIERS: Dict[str, float] = {
    "ecommerce": 1.0,
    "healthcare": 1.8,
    "fintech": 2.0,
    "manufacturing": 1.5,
    "automotive": 2.0,
    "it": 1.2,
}
DEFAULT_BUDGET_MULTIPLIER = 1.0


# ============================================================================
# TIMELINE
# ============================================================================

BASE_TIMELINE_MONTHS: Dict[str, int] = {
    "ecommerce": 6,
    "manufacturing": 9,
    "healthcare": 12,
    "fintech": 15,
    "automotive": 18,
}
DEFAULT_TIMELINE_MONTHS = 6
MAX_TIMELINE_COMPLEXITY = 2.0
TIMELINE_COMPLEXITY_CHARS = 15000

# (name, duration, dependencies, deliverables)
COMMON_PHASES: List[Tuple[str, int, List[str], List[str]]] = [
    ("Discovery & Planning", 1, [], ["Requirements", "Architecture"]),
    ("Core Development", 3, ["Discovery & Planning"], ["MVP", "Core Features"]),
    ("Integration & Testing", 2, ["Core Development"], ["Integrations", "Test Results"]),
    ("Launch & Support", 1, ["Integration & Testing"], ["Go-Live", "Documentation"]),
]

# Inserted after Core Development
INDUSTRY_PHASES: Dict[str, Tuple[str, int, List[str], List[str]]] = {
    "healthcare": (
        "Compliance Validation", 1, ["Core Development"],
        ["HIPAA Audit", "Security Certification"],
    ),
    "fintech": (
        "Security Certification", 1, ["Core Development"],
        ["PCI-DSS Assessment", "Penetration Test Report"],
    ),
    "automotive": (
        "Safety Validation", 2, ["Core Development"],
        ["Safety Case", "HIL Test Report"],
    ),
}

CRITICAL_PATH_PREFIX = ["Requirements Analysis", "Architecture Design", "Core Development"]
CRITICAL_PATH_SUFFIX = ["Testing", "Go-Live"]
CRITICAL_PATH_INSERTS: Dict[str, List[str]] = {
    "ecommerce": ["Payment Integration", "Mobile Optimization"],
    "healthcare": ["Security Implementation", "HIPAA Compliance"],
    "fintech": ["Security Implementation", "Payment Integration", "Fraud Detection"],
    "manufacturing": ["IoT Integration", "Edge Deployment"],
    "automotive": ["Functional Safety", "Vehicle Integration"],
    "it": ["Cloud Infrastructure", "Security Implementation"],
}


# ============================================================================
# TECH STACK
# ============================================================================

BASE_STACK: Dict[str, List[str]] = {
    "frontend": ["React 18+", "TypeScript", "Tailwind CSS"],
    "backend": ["Node.js", "Express.js", "PostgreSQL"],
    "database": ["PostgreSQL", "Redis"],
    "infrastructure": ["Docker", "Kubernetes", "AWS/Azure"],
}

STACK_SUPPLEMENTS: Dict[str, Dict[str, List[str]]] = {
    "ecommerce": {
        "frontend": ["Next.js", "PWA"],
        "backend": ["Stripe API", "PayPal SDK"],
        "database": ["Elasticsearch"],
    },
    "healthcare": {
        "backend": ["FHIR API", "HL7"],
        "database": ["MongoDB"],
        "infrastructure": ["AWS HIPAA", "VPN"],
    },
    "fintech": {
        "backend": ["Spring Security", "Kafka"],
        "database": ["Apache Cassandra"],
        "infrastructure": ["API Gateway", "WAF"],
    },
    "manufacturing": {
        "backend": ["MQTT", "Apache Kafka"],
        "database": ["InfluxDB", "MongoDB"],
        "infrastructure": ["Edge Computing", "IoT Gateway"],
    },
    "automotive": {
        "backend": ["AUTOSAR Adaptive", "MQTT"],
        "database": ["TimescaleDB"],
        "infrastructure": ["OTA Update Service", "Vehicle Gateway"],
    },
    "it": {
        "backend": ["Spring Boot", "Keycloak"],
        "database": ["Elasticsearch"],
        "infrastructure": ["GitLab CI/CD", "Terraform"],
    },
}


# ============================================================================
# SUCCESS METRICS
# ============================================================================

# (name, current, target, improvement)
BASE_METRICS: List[Tuple[str, str, str, str]] = [
    ("Performance", "TBD", "<3s load time", "+60%"),
    ("User Satisfaction", "TBD", ">4.5/5", "+25%"),
]

INDUSTRY_METRICS: Dict[str, List[Tuple[str, str, str, str]]] = {
    "ecommerce": [
        ("Conversion Rate", "2.1%", "4.5%", "+114%"),
        ("Mobile Conversion", "1.2%", "3.8%", "+217%"),
    ],
    "healthcare": [
        ("Data Security Score", "TBD", "98%", "+30%"),
        ("Compliance Score", "TBD", "100%", "+40%"),
    ],
    "fintech": [
        ("Transaction Processing", "TBD", "<100ms", "+200%"),
        ("Fraud Detection Rate", "TBD", "99.5%", "+15%"),
    ],
    "manufacturing": [
        ("OEE", "TBD", ">85%", "+20%"),
        ("Unplanned Downtime", "TBD", "-50%", "+50%"),
    ],
    "automotive": [
        ("OTA Success Rate", "TBD", ">99.5%", "+10%"),
        ("Defect Density", "TBD", "<0.5/KLOC", "+40%"),
    ],
    "it": [
        ("System Uptime", "TBD", ">99.9%", "+5%"),
        ("API Response Time", "TBD", "<200ms", "+50%"),
    ],
}


# ============================================================================
# SUMMARY
# ============================================================================

SUMMARY_MAX_LINES = 3
SUMMARY_MAX_CHARS = 200
SUMMARY_TEMPLATE = (
    "{industry} project: {excerpt}... "
    "[Analyzed with industry-specific rules for {focus_areas}]"
)
