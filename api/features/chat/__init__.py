"""Chat feature: server-side proxy to the Groq chat completions API."""
