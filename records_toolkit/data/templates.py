"""
Letter-body templates for each record category.

Each template lists the fields a requester should collect, a Jinja2 body
that renders those fields (unfilled fields render as bracketed
placeholders), practical tips, and a rough fee range for display.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Mapping

from records_toolkit.rendering import render as render_template


class RecordCategory(enum.Enum):
    """Classification of the records being requested."""

    BODY_CAMERA = "body-camera"
    POLICE_REPORT = "police-report"
    EMAILS = "emails"
    CONTRACTS = "contracts"
    MEETING_MINUTES = "meeting-minutes"
    FINANCIAL_RECORDS = "financial-records"
    PERSONNEL_FILES = "personnel-files"
    INSPECTION_REPORTS = "inspection-reports"
    SURVEILLANCE_VIDEO = "surveillance-video"
    CALLS_911 = "911-calls"
    USE_OF_FORCE = "use-of-force"
    COMPLAINTS = "complaints"
    POLICIES = "policies"
    GENERAL = "general"


@dataclass(frozen=True)
class RecordTemplate:
    """A letter-body template for one record category."""

    category: RecordCategory
    name: str
    description: str
    key_fields: tuple[str, ...]
    body: str
    tips: tuple[str, ...] = field(default_factory=tuple)
    fee_estimate: str = ""

    def render(self, fields: Mapping[str, str]) -> str:
        """Render the body with the collected fields."""
        return render_template(self.body, **dict(fields)).strip()


# ---------------------------------------------------------------------------
# Template bodies
# ---------------------------------------------------------------------------

BODY_CAMERA_BODY = """\
SUBJECT MATTER: Body-Worn Camera (BWC) and Dashboard Camera Footage

I request access to and copies of all body-worn camera footage and dashboard \
camera footage from the following incident:

INCIDENT DETAILS:
- Date: {{ date or "[Date of incident]" }}
- Time: {{ time or "[Approximate time range]" }}
- Location: {{ location or "[Specific address or intersection]" }}
- Officer(s): {{ officerName or "[Officer names if known, or responding unit numbers]" }}
- Case/CAD Number: {{ caseNumber or "[If known]" }}

REQUESTED RECORDS:
1. All BWC footage from all officers present at the scene
2. All dashboard camera footage from vehicles at the scene
3. Any related audio recordings
4. CAD (Computer-Aided Dispatch) records for this incident
5. Incident report narrative
6. Metadata showing when footage was accessed, by whom, and whether it was edited

FORMAT: Electronic format (MP4 or native format), with metadata intact. If \
redaction is necessary, please provide a redaction log specifying what was \
redacted and under what exemption.

PUBLIC INTEREST: This request serves the public interest in transparency and \
police accountability.
"""

POLICE_REPORT_BODY = """\
SUBJECT MATTER: Police Reports and Incident Records

I request access to and copies of all records related to the following incident:

INCIDENT IDENTIFICATION:
- Case/Report Number: {{ caseNumber or "[Case number]" }}
- Date of Incident: {{ date or "[Date]" }}
- Location: {{ location or "[Location]" }}
- Involved Parties: {{ involvedParties or "[Names if known]" }}

REQUESTED RECORDS:
1. Initial incident report and all supplemental reports
2. Arrest reports and booking records
3. Witness statements and interviews
4. Evidence logs and chain of custody documentation
5. Use of force reports (if applicable)
6. Officer narrative reports
7. Dispatch logs and CAD records
8. Any audio/video recordings related to the incident

FORMAT: Electronic format (searchable PDF preferred), with all attachments \
and exhibits.
"""

EMAILS_BODY = """\
SUBJECT MATTER: Email Communications

I request access to and copies of all email communications meeting the \
following criteria:

SEARCH PARAMETERS:
- Date Range: {{ dateRange or "[From Date] to [To Date]" }}
- Sender(s): {{ senders or "[Names, titles, or departments]" }}
- Recipient(s): {{ recipients or "[Names, titles, or departments]" }}
- Subject Matter: {{ subject or "[Brief description of topic]" }}
- Keywords: {{ keywords or "[Specific search terms, phrases, or names]" }}

REQUESTED RECORDS:
1. All email messages (sent and received) matching the above criteria
2. All attachments to those emails
3. Any draft emails related to this matter
4. Calendar invitations and meeting requests related to this topic
5. Email metadata (headers, routing information, timestamps)

FORMAT: Native format (PST, MBOX, or EML) with metadata intact, or \
searchable PDFs with attachments.

SCOPE: Please search all relevant accounts, including shared departmental \
accounts, archived or backup email systems, and personal devices used for \
government business.

SEGREGABILITY: If any emails contain exempt information, please produce the \
non-exempt portions with redaction logs explaining each withholding.
"""

CONTRACTS_BODY = """\
SUBJECT MATTER: Government Contracts and Agreements

I request access to and copies of all records related to the following contract(s):

CONTRACT IDENTIFICATION:
- Vendor/Contractor: {{ vendor or "[Name of company/individual]" }}
- Contract Amount/Range: {{ contractAmount or "[Dollar amount or range]" }}
- Date Range: {{ dateRange or "[Date range]" }}
- Contract Type: {{ contractType or "[Service type, e.g., construction, consulting, IT services]" }}

REQUESTED RECORDS:
1. Original executed contract and all amendments
2. Request for Proposals (RFP) or Request for Qualifications (RFQ)
3. All bids or proposals received, with bid tabulation sheets
4. Justification for contractor selection
5. Payment records and invoices
6. Performance evaluations or progress reports
7. Correspondence between agency and contractor
8. Change orders and modifications

FORMAT: Electronic format (searchable PDF) with all attachments and exhibits.

PUBLIC INTEREST: This request serves the public's interest in transparency in \
government spending and contractor accountability.
"""

MEETING_MINUTES_BODY = """\
SUBJECT MATTER: Meeting Minutes, Agendas, and Related Materials

I request access to and copies of records for the following meeting(s):

MEETING IDENTIFICATION:
- Public Body: {{ body or "[Name of board, council, or commission]" }}
- Meeting Date(s): {{ meetingDate or "[Date or date range]" }}
- Topic: {{ topic or "[Agenda item or subject]" }}

REQUESTED RECORDS:
1. Agendas and agenda packets
2. Approved and draft minutes
3. Audio and video recordings of the meeting
4. Materials distributed to members before or during the meeting
5. Records of votes taken
6. Records of any closed or executive sessions, to the extent disclosable

FORMAT: Electronic format (searchable PDF for documents, native format for recordings).
"""

FINANCIAL_RECORDS_BODY = """\
SUBJECT MATTER: Financial Records and Budgets

I request access to and copies of the following financial records:

PARAMETERS:
- Department/Program: {{ department or "[Department or program name]" }}
- Fiscal Year(s): {{ fiscalYear or "[Fiscal year or range]" }}
- Expenditure Type: {{ expenditureType or "[Category of spending]" }}

REQUESTED RECORDS:
1. Adopted and proposed budgets
2. Expenditure reports and general ledger entries
3. Purchase orders, invoices, and payment records
4. Credit card and travel reimbursement records
5. Audit reports and management letters
6. Grant applications and award documents

FORMAT: Electronic format, with spreadsheets in native format (XLSX or CSV).
"""

PERSONNEL_FILES_BODY = """\
SUBJECT MATTER: Personnel and Employment Records

I request access to and copies of disclosable personnel records for:

EMPLOYEE IDENTIFICATION:
- Employee Name: {{ employeeName or "[Full name]" }}
- Position/Title: {{ position or "[Job title]" }}
- Department: {{ department or "[Department]" }}
- Date Range: {{ dateRange or "[Date range]" }}

REQUESTED RECORDS:
1. Job title, salary, and dates of employment
2. Disciplinary records and final dispositions
3. Sustained complaints and findings
4. Training and certification records
5. Separation agreements and settlement agreements

EXEMPTIONS: I understand certain personal information may be exempt. Please \
redact only information that is specifically exempt and release the remainder.
"""

INSPECTION_REPORTS_BODY = """\
SUBJECT MATTER: Inspection and Compliance Reports

I request access to and copies of inspection records for:

FACILITY IDENTIFICATION:
- Facility Name: {{ facilityName or "[Name of facility or business]" }}
- Address: {{ address or "[Facility address]" }}
- Inspection Type: {{ inspectionType or "[Health, safety, building, environmental, etc.]" }}
- Date Range: {{ dateRange or "[Date range]" }}

REQUESTED RECORDS:
1. Inspection reports and checklists
2. Notices of violation and citations
3. Corrective action plans and follow-up inspection reports
4. Complaints that prompted inspections
5. Photographs and field notes taken during inspections
6. Enforcement actions and penalty assessments

FORMAT: Electronic format (searchable PDF), including photographs in native format.
"""

SURVEILLANCE_VIDEO_BODY = """\
SUBJECT MATTER: Surveillance and Security Camera Footage

I request access to and copies of surveillance footage as follows:

FOOTAGE DETAILS:
- Location/Camera: {{ location or "[Building, intersection, or camera identifier]" }}
- Date: {{ date or "[Date]" }}
- Time Range: {{ timeRange or "[Start time to end time]" }}
- Incident Description: {{ incident or "[Brief description]" }}

REQUESTED RECORDS:
1. All video footage from cameras covering the location during the time range
2. Camera location maps and field-of-view documentation
3. Retention policies for surveillance footage
4. Logs of who accessed or exported the footage

PRESERVATION: Surveillance footage is often overwritten on a short retention \
cycle. Please preserve the requested footage immediately upon receipt of this request.

FORMAT: Native video format with timestamps intact.
"""

CALLS_911_BODY = """\
SUBJECT MATTER: 911 Call Recordings and Dispatch Logs

I request access to and copies of the following emergency communications records:

CALL DETAILS:
- Date: {{ date or "[Date of call]" }}
- Approximate Time: {{ time or "[Time]" }}
- Location of Incident: {{ location or "[Address]" }}
- Incident/Call Number: {{ callNumber or "[If known]" }}

REQUESTED RECORDS:
1. Audio recordings of all 911 calls related to this incident
2. Radio dispatch recordings
3. CAD (Computer-Aided Dispatch) event chronology and notes
4. Unit assignment and response time logs

FORMAT: Audio in native or MP3 format; logs as searchable PDF or CSV.
"""

USE_OF_FORCE_BODY = """\
SUBJECT MATTER: Use of Force Reports and Policies

I request access to and copies of use of force records as follows:

PARAMETERS:
- Agency/Department: {{ department or "[Police department or unit]" }}
- Date Range: {{ dateRange or "[Date range]" }}
- Incident/Officer: {{ incident or "[Specific incident or officer, if any]" }}

REQUESTED RECORDS:
1. Use of force reports and supervisor reviews
2. Use of force policies and general orders in effect during the date range
3. Internal affairs investigations and findings relating to force incidents
4. Aggregate use of force data and annual reports
5. Training materials on use of force and de-escalation

PUBLIC INTEREST: Records documenting the use of force by government employees \
are of substantial public interest for police accountability.
"""

COMPLAINTS_BODY = """\
SUBJECT MATTER: Complaints and Grievances

I request access to and copies of complaint records as follows:

PARAMETERS:
- Subject of Complaints: {{ subject or "[Department, employee, or program]" }}
- Date Range: {{ dateRange or "[Date range]" }}
- Complaint Type: {{ complaintType or "[Misconduct, service, discrimination, etc.]" }}

REQUESTED RECORDS:
1. Complaints received, with identifying details of private complainants redacted
2. Investigation files and findings
3. Final dispositions and any discipline imposed
4. Complaint logs or tracking databases
5. Correspondence with complainants regarding outcomes

FORMAT: Electronic format (searchable PDF or CSV for logs).
"""

POLICIES_BODY = """\
SUBJECT MATTER: Policies, Procedures, and Training Materials

I request access to and copies of the following policy records:

PARAMETERS:
- Policy Area: {{ policyArea or "[Subject of policy]" }}
- Department: {{ department or "[Department]" }}

REQUESTED RECORDS:
1. Current written policies, procedures, and general orders
2. Prior versions and revision histories
3. Training materials and curricula implementing these policies
4. Policy compliance audits or reviews
5. Memos or directives interpreting the policies

TIMEFRAME: All revisions from {{ dateRange or "[Start Date] through present" }}.

FORMAT: Electronic format (searchable PDF or Word documents).
"""

GENERAL_BODY = """\
SUBJECT MATTER: {{ description or "[Describe the records you are seeking]" }}

I request access to and copies of the following records:

DESCRIPTION OF RECORDS:
{{ description or "[Provide a detailed description of the records you seek]" }}

REQUESTED RECORDS:
{{ specificItems or "[List specific categories of records you want]" }}

TIMEFRAME: {{ dateRange or "[Specify date range, e.g., January 1, 2023 through December 31, 2023]" }}

KEYWORDS: {{ keywords or "[Provide keywords or search terms that might help locate records]" }}

SEGREGABILITY: If any portions of responsive records are exempt from \
disclosure, please redact only those specific portions and release the \
remainder, with a detailed exemption log explaining each withholding.
"""


RECORD_TEMPLATES: dict[RecordCategory, RecordTemplate] = {
    t.category: t
    for t in (
        RecordTemplate(
            category=RecordCategory.BODY_CAMERA,
            name="Body-Worn Camera Footage",
            description="Request police body camera or dashboard camera footage",
            key_fields=("date", "time", "location", "officerName", "caseNumber"),
            body=BODY_CAMERA_BODY,
            tips=(
                "Be as specific as possible about date, time, and location",
                "Include officer names or badge numbers if known",
                "Request CAD records to cross-reference",
                "Request a redaction log if portions are withheld",
            ),
            fee_estimate="$50-$200 depending on jurisdiction",
        ),
        RecordTemplate(
            category=RecordCategory.POLICE_REPORT,
            name="Police Reports & Incident Records",
            description="Request police reports, arrest records, or incident documentation",
            key_fields=("caseNumber", "date", "location", "involvedParties"),
            body=POLICE_REPORT_BODY,
            tips=(
                "Include the case or report number if you have it",
                "Request all supplemental reports, not just the initial report",
                "Request dispatch/CAD records for a complete timeline",
            ),
            fee_estimate="$25-$100 typically",
        ),
        RecordTemplate(
            category=RecordCategory.EMAILS,
            name="Email Communications",
            description="Request email correspondence between officials",
            key_fields=("dateRange", "senders", "recipients", "keywords", "subject"),
            body=EMAILS_BODY,
            tips=(
                "Use specific keywords and phrases, not general topics",
                "Name specific individuals, not just departments",
                "Specify date ranges that are reasonable but comprehensive",
                "Request native format so attachments are not lost",
            ),
            fee_estimate="$100-$500+ for large requests",
        ),
        RecordTemplate(
            category=RecordCategory.CONTRACTS,
            name="Contracts & Agreements",
            description="Request government contracts, vendor agreements, or procurement records",
            key_fields=("vendor", "contractAmount", "dateRange", "contractType"),
            body=CONTRACTS_BODY,
            tips=(
                "Include contract numbers if known",
                "Request the full procurement file, not just the signed contract",
                "Request payment records to verify amounts",
            ),
            fee_estimate="$50-$200 typically",
        ),
        RecordTemplate(
            category=RecordCategory.MEETING_MINUTES,
            name="Meeting Minutes & Agendas",
            description="Request minutes, agendas, and recordings of public meetings",
            key_fields=("body", "meetingDate", "topic"),
            body=MEETING_MINUTES_BODY,
            tips=(
                "Check the agency website first; many minutes are already posted",
                "Ask for agenda packets, which contain the underlying documents",
            ),
            fee_estimate="$25-$150 typically",
        ),
        RecordTemplate(
            category=RecordCategory.FINANCIAL_RECORDS,
            name="Financial Records & Budgets",
            description="Request budgets, expenditures, and audit records",
            key_fields=("department", "fiscalYear", "expenditureType"),
            body=FINANCIAL_RECORDS_BODY,
            tips=(
                "Request spreadsheets in native format for analysis",
                "Ask for audit management letters as well as the audit report",
            ),
            fee_estimate="$50-$250 depending on volume",
        ),
        RecordTemplate(
            category=RecordCategory.PERSONNEL_FILES,
            name="Personnel Files & Employment Records",
            description="Request disclosable employment and disciplinary records",
            key_fields=("employeeName", "position", "department", "dateRange"),
            body=PERSONNEL_FILES_BODY,
            tips=(
                "Salary and job title are public in most states",
                "Focus on sustained findings and final discipline",
            ),
            fee_estimate="$50-$200; often partially denied",
        ),
        RecordTemplate(
            category=RecordCategory.INSPECTION_REPORTS,
            name="Inspection & Compliance Reports",
            description="Request health, safety, building, or environmental inspection records",
            key_fields=("facilityName", "address", "inspectionType", "dateRange"),
            body=INSPECTION_REPORTS_BODY,
            tips=(
                "Request follow-up inspections to see whether violations were corrected",
                "Ask for the complaints that triggered inspections",
            ),
            fee_estimate="$25-$100 typically",
        ),
        RecordTemplate(
            category=RecordCategory.SURVEILLANCE_VIDEO,
            name="Surveillance & Security Footage",
            description="Request footage from government-operated cameras",
            key_fields=("location", "date", "timeRange", "incident"),
            body=SURVEILLANCE_VIDEO_BODY,
            tips=(
                "Send the request quickly; footage is often overwritten within days",
                "Include a preservation demand",
            ),
            fee_estimate="$50-$300 depending on length",
        ),
        RecordTemplate(
            category=RecordCategory.CALLS_911,
            name="911 Call Recordings & Dispatch Logs",
            description="Request emergency call audio and dispatch records",
            key_fields=("date", "time", "location", "callNumber"),
            body=CALLS_911_BODY,
            tips=(
                "Some states restrict release of 911 audio; request transcripts as a fallback",
                "CAD logs show response times",
            ),
            fee_estimate="$25-$150 depending on audio length",
        ),
        RecordTemplate(
            category=RecordCategory.USE_OF_FORCE,
            name="Use of Force Reports & Policies",
            description="Request use of force reports, reviews, and policies",
            key_fields=("department", "dateRange", "incident"),
            body=USE_OF_FORCE_BODY,
            tips=(
                "Request aggregate data as well as individual reports",
                "Ask for the policy version in effect at the time of the incident",
            ),
            fee_estimate="$50-$300 depending on scope",
        ),
        RecordTemplate(
            category=RecordCategory.COMPLAINTS,
            name="Complaints & Grievances",
            description="Request complaints filed against an agency or its employees",
            key_fields=("subject", "dateRange", "complaintType"),
            body=COMPLAINTS_BODY,
            tips=(
                "Request complaint logs to gauge volume before requesting full files",
                "Ask for final dispositions",
            ),
            fee_estimate="$50-$200",
        ),
        RecordTemplate(
            category=RecordCategory.POLICIES,
            name="Policies, Procedures & Training Materials",
            description="Request agency policies, manuals, and training materials",
            key_fields=("policyArea", "department", "dateRange"),
            body=POLICIES_BODY,
            tips=(
                "Request both current and historical versions to track changes",
                "Generally these should have minimal exemptions",
            ),
            fee_estimate="$25-$100",
        ),
        RecordTemplate(
            category=RecordCategory.GENERAL,
            name="General Public Records Request",
            description="Template for any other type of public record",
            key_fields=("description", "specificItems", "dateRange", "keywords"),
            body=GENERAL_BODY,
            tips=(
                "Be as specific as possible about what you are seeking",
                "Name specific people or departments",
                "Give reasonable date ranges",
                "Ask for segregability of exempt portions",
            ),
            fee_estimate="Varies greatly",
        ),
    )
}


def get_record_template(category: RecordCategory | str) -> RecordTemplate:
    return RECORD_TEMPLATES[RecordCategory(category)]


def all_record_templates() -> list[RecordTemplate]:
    return list(RECORD_TEMPLATES.values())
