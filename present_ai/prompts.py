GIFT_IDEAS_PROMPT = """Generate {count} unique and creative gift ideas for:
Name: {name}
Age: {age}
Gender: {gender}
Relationship: {relationship}
Hobbies: {hobbies}
Personality: {personality}
Budget: {budget}
Occasion: {occasion}
{follow_up}
Format as JSON array:
[
  {{
    "name": "Gift name",
    "appropriateness": "Why appropriate",
    "relation": "How it relates",
    "priceRange": "Price range within {budget}"
  }}
]"""

FOLLOW_UP = """
This is request #{request_number}. The following gifts have already been suggested, please provide completely different ideas:
{previous}
"""
