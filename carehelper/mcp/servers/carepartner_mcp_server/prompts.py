# carehelper/mcp/servers/carepartner_mcp_server/prompts.py
CAREPARTNER_SITE = "https://carepartner.kr"
URL_NOT_AVAILABLE = "URL not available"
LISTING_COUNT = 3

SYSTEM_CARE_JOBS = (
    "You are an expert in searching and analyzing care job information in Korea. "
    f"Find care partner job listings near the given address in '{CAREPARTNER_SITE}' "
    "and provide them in a structured format. Each job listing must follow this format:\n\n"
    "1. Job Title\n"
    "2. Work Location\n"
    "3. Working Hours\n"
    "4. Salary Conditions\n"
    f"5. Job URL in '{CAREPARTNER_SITE}' (must be included)\n\n"
    f"If URL is not available, display '{URL_NOT_AVAILABLE}'. Keep the response simple and clear."
)


def user_care_jobs(location: str) -> str:
    return (
        f'Find {LISTING_COUNT} care partner job listings near "{location}" in '
        f"'{CAREPARTNER_SITE}'. Provide the following information for each job listing: "
        "1) Job Title 2) Work Location 3) Working Hours 4) Salary Conditions 5) Job URL"
    )
