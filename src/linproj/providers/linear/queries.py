"""GraphQL documents used by the Linear provider."""

from __future__ import annotations

ISSUE_FIELDS = """
  id
  identifier
  title
  description
  url
  priority
  createdAt
  updatedAt
  dueDate
  estimate
  state { name type }
  team { key name }
  assignee { id name email }
  labels { nodes { name color } }
  project { name }
"""

GET_ISSUE = f"""
query($identifier: String!) {{
  issue(id: $identifier) {{
    {ISSUE_FIELDS}
  }}
}}
"""

GET_TEAMS = """
query {
  teams { nodes { id name key } }
}
"""

GET_WORKFLOW_STATES = """
query($teamId: String!) {
  team(id: $teamId) {
    states { nodes { id name type } }
  }
}
"""

GET_LABELS = """
query($teamId: String!) {
  team(id: $teamId) {
    labels { nodes { id name color } }
  }
}
"""

GET_VIEWER = """
query {
  viewer { id name email }
}
"""

GET_USER_BY_EMAIL = """
query($email: String!) {
  users(filter: { email: { eq: $email } }) {
    nodes { id name email }
  }
}
"""

GET_PROJECTS = """
query {
  projects { nodes { id name } }
}
"""

UPDATE_ISSUE = f"""
mutation($id: String!, $input: IssueUpdateInput!) {{
  issueUpdate(id: $id, input: $input) {{
    success
    issue {{
      {ISSUE_FIELDS}
    }}
  }}
}}
"""
