"""
Prompt construction for the repository security analysis.

The attack described here is fictitious. The model receives only the
repository URL and is asked to infer a plausible stack and dependency tree.
"""

# Known compromised packages for the September 2025 scenario: (name, first, last)
COMPROMISED_PACKAGES = [
    ("express", "4.19.0", "4.19.2"),
    ("lodash", "4.17.22", "4.17.23"),
    ("axios", "1.6.9", "1.7.1"),
    ("chalk", "5.3.1", "5.3.2"),
    ("react-scripts", "5.0.2", "5.0.3"),
    ("@nestjs/core", "10.3.4", "10.3.6"),
]


def _format_compromised_packages() -> str:
    return "\n".join(
        f"    *   `{name}` (versions {first} - {last})"
        for name, first, last in COMPROMISED_PACKAGES
    )


def build_prompt(repo_url: str) -> str:
    """Build the instruction document sent to the model for one repository."""
    return f"""You are a world-class cybersecurity AI called "GitHub Guardian". Your task is to analyze a GitHub repository for potential security vulnerabilities.

**Repository to Analyze:** {repo_url}

**Analysis Context:**
You must perform two main checks:
1.  **General Malicious Code Check:** Based on the name and likely purpose of the repository, infer a plausible technology stack and dependency tree. Analyze this hypothetical codebase for common vulnerabilities such as hardcoded secrets, outdated dependencies, possible injection flaws or suspicious code patterns.
2.  **Specific Supply-Chain Attack Vector (September 2025):** You must check for a specific, notorious (but fictitious for this exercise) supply-chain attack that took place in September 2025.
    *   **Attack Details:** A sophisticated phishing campaign targeted the maintainers of popular open-source libraries. This resulted in malicious code being injected into specific versions of more than a dozen packages.
    *   **Malicious Code Behavior:** The injected code was heavily obfuscated. It usually relied on post-install scripts to scan environment variables (such as AWS keys and API tokens) and exfiltrate them to a remote server.
    *   **Known Compromised Packages (Examples):**
{_format_compromised_packages()}

**Instructions:**
1.  Based on the repository URL, infer the type of project (for example, React frontend, Node.js backend, Python data science).
2.  Create a realistic hypothetical `package.json` or `requirements.txt` for such a project.
3.  Analyze these hypothetical dependencies against the September 2025 attack vector.
4.  Perform a general security assessment.
5.  Provide a structured answer in JSON format according to the provided schema. Be creative but realistic in your analysis.
"""
