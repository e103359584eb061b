"""Seed data."""

TEMPLATE_RESUME_NAME = "General Resume Template"

TEMPLATE_RESUME = """EDUCATION
Bachelor of Science in Business Administration
State University

SKILLS
Customer Support and Troubleshooting
Customer Relationship Management Software (CRM)
Lead Qualification
Data Analysis and Reporting
Bilingual Communication (English & Spanish)

EXPERIENCE
Retail Technology Specialist | Example Wireless
March 2023 - Present
- Managed inbound calls and in-store customer interactions for device and service support.
- Troubleshot phone and tablet issues and explained data-protection practices to customers.
- Maintained CRM records to keep account history accurate for the sales team.

Outside Sales Representative | Example Cable
October 2022 - February 2023
- Prospected door to door and qualified new leads across an assigned territory.
- Prepared service proposals tailored to each household's needs.

CERTIFICATES
Google IT Support Certificate
Data Analytics Certificate"""
