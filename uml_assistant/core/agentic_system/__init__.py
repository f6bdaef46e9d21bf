"""
Agentic system: request classification, response generation, prompt
catalog and the PlantUML diagram refinement graph.
"""
