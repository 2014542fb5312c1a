"""
First-aid guidance entries in priority order.

Earlier entries shadow later ones: a key that is a substring of a later key
wins whenever both occur in the input. Keep multi-word and compound keys
(``heat stroke``, ``sunburn``, ``blood sugar``) ahead of the shorter keys they
contain (``stroke``, ``burn``, ``blood``).
"""
from __future__ import annotations

from typing import List

from .matcher import KeywordTable
from .schema import KnowledgeEntry


def _steps(*lines: str) -> str:
    return "\n".join(f"{i}. {line}" for i, line in enumerate(lines, start=1))


DEFAULT_GUIDANCE = _steps(
    "Call emergency services immediately if the person is seriously hurt or unwell.",
    "Keep the person calm and still, and stay with them.",
    "Check that they are breathing and responsive.",
    "If unconscious but breathing, place them in the recovery position.",
    "If they are not breathing, begin CPR if you are trained.",
    "Do not give food or drink unless specifically advised.",
    "Monitor their condition until help arrives.",
)

SAFE_FALLBACK_GUIDANCE = "Sorry, I can't help right now. Call emergency services if you need urgent help!"


CHOKING = _steps(
    "Ask the person if they are choking. If they can cough forcefully, encourage them to keep coughing.",
    "If they cannot speak, cough, or breathe, stand behind them and lean them slightly forward.",
    "Give up to 5 firm back blows between the shoulder blades with the heel of your hand.",
    "If the object is not dislodged, give up to 5 abdominal thrusts: fist just above the navel, pull sharply inward and upward.",
    "Alternate 5 back blows and 5 abdominal thrusts until the object comes out.",
    "If the person becomes unconscious, call emergency services and begin CPR.",
)

CARDIAC_ARREST = _steps(
    "Call emergency services immediately and ask for an AED (defibrillator).",
    "Check for breathing for no more than 10 seconds.",
    "If not breathing, start CPR: push hard and fast in the centre of the chest, 100-120 compressions per minute.",
    "Give 2 rescue breaths after every 30 compressions if you are trained; otherwise continue compressions only.",
    "Use the AED as soon as it arrives and follow its prompts.",
    "Do not stop until help takes over or the person starts breathing normally.",
)

DENTAL = _steps(
    "Pick the tooth up by the crown, not the root.",
    "If dirty, rinse it briefly with milk or saline. Do not scrub it.",
    "Try to place it back in the socket and have the person bite gently on a clean cloth.",
    "If that is not possible, keep the tooth in milk or the person's saliva.",
    "See a dentist or emergency department within 30 minutes.",
)

HEAD_INJURY = _steps(
    "Call emergency services for serious injury.",
    "Do not move the person if you suspect a head, neck or back injury unless they are in danger.",
    "Check breathing and responsiveness. If not breathing, begin CPR.",
    "Control any bleeding with gentle pressure using a clean cloth, avoiding pressure on any skull deformity.",
    "Keep the person still and talk to them to keep them calm.",
    "Watch for vomiting, confusion, drowsiness or unequal pupils and report them to responders.",
)

DROWNING = _steps(
    "Get the person out of the water only if it is safe for you to do so.",
    "Call emergency services.",
    "Check for breathing. If not breathing, give 5 rescue breaths and then begin CPR.",
    "If breathing, place them in the recovery position so water can drain.",
    "Remove wet clothing and keep them warm.",
    "Everyone rescued from drowning needs medical assessment, even if they seem fine.",
)

ANAPHYLAXIS = _steps(
    "Call emergency services immediately for a severe allergic reaction: swelling of the face or throat, or difficulty breathing.",
    "Use the person's epinephrine auto-injector (EpiPen) into the outer thigh if available.",
    "Remove the trigger if possible (stinger, food, medication).",
    "Help them sit upright if breathing is hard, or lie flat with legs raised if they feel faint.",
    "A second auto-injector may be given after 5-15 minutes if symptoms do not improve.",
    "For mild reactions (itching, hives only), an antihistamine may help; keep monitoring breathing.",
)

HEART_ATTACK = _steps(
    "Call emergency services immediately.",
    "Sit the person down in a position that makes breathing comfortable.",
    "If they are not allergic, have them chew one adult aspirin (300 mg).",
    "Loosen tight clothing.",
    "If they have prescribed angina medication, help them take it.",
    "Monitor breathing and be ready to start CPR if they collapse.",
)

HEAT_STROKE = _steps(
    "Call emergency services. Heat stroke is life-threatening.",
    "Move the person to a cool, shaded place.",
    "Remove excess clothing and cool them quickly: cool water on the skin, fanning, ice packs to neck, armpits and groin.",
    "If they are alert, give small sips of cool water.",
    "Do not give fever medication such as paracetamol or aspirin.",
    "Keep cooling until help arrives or their temperature drops.",
)

STROKE = _steps(
    "Remember FAST: Face drooping, Arm weakness, Speech difficulty, Time to call emergency services.",
    "Call emergency services immediately.",
    "Note the time the symptoms began.",
    "Do not give food, drink or medication.",
    "Keep the person comfortable, lying on their side if they are drowsy.",
    "Stay with them and monitor breathing until help arrives.",
)

SEIZURE = _steps(
    "Stay calm and time the seizure.",
    "Clear the area of hard or sharp objects and cushion the head.",
    "Do not restrain the person or put anything in their mouth.",
    "When the jerking stops, turn them on their side into the recovery position.",
    "Call emergency services if the seizure lasts more than 5 minutes, repeats, or it is their first seizure.",
    "Stay with them until they are fully awake.",
)

FAINTING = _steps(
    "Lay the person flat on their back.",
    "Raise their legs about 30 cm to help blood flow to the brain.",
    "Loosen tight clothing and make sure they have fresh air.",
    "They should come round within a minute. If not, call emergency services.",
    "When they recover, have them sit up slowly and rest.",
)

UNCONSCIOUS = _steps(
    "Call emergency services.",
    "Check for breathing by looking, listening and feeling for 10 seconds.",
    "If breathing, place them in the recovery position and keep the airway open.",
    "If not breathing, begin CPR.",
    "Do not give anything by mouth.",
    "Monitor breathing continuously until help arrives.",
)

PANIC_ATTACK = _steps(
    "Stay with the person and speak calmly.",
    "Move them to a quiet place if possible.",
    "Encourage slow breathing: in through the nose for 4 seconds, out through the mouth for 6 seconds.",
    "Ask them to focus on something they can see or touch.",
    "If there is chest pain, or this is their first episode, call emergency services to rule out a heart problem.",
)

ASTHMA = _steps(
    "Help the person sit upright and stay calm.",
    "Help them use their reliever inhaler: 1 puff every 30-60 seconds, up to 10 puffs.",
    "Call emergency services if there is no improvement, their lips turn blue, or they cannot speak.",
    "If help has not arrived after 15 minutes, repeat the inhaler doses.",
    "Loosen tight clothing and keep them away from smoke or allergens.",
)

SMOKE_INHALATION = _steps(
    "Get the person into fresh air only if it is safe to do so.",
    "Call emergency services.",
    "For suspected carbon monoxide, turn off the source if safe and open windows.",
    "If they are not breathing, begin CPR.",
    "Keep them sitting upright and calm while waiting for help.",
)

DIABETIC = _steps(
    "If the person is conscious and can swallow, give 15-20 g of fast sugar: juice, glucose tablets or regular soda.",
    "Wait 15 minutes and give more sugar if they have not improved.",
    "Once they feel better, give a snack with starch, such as bread or biscuits.",
    "If they are unconscious or cannot swallow, do not give anything by mouth. Call emergency services.",
    "Place an unconscious person in the recovery position.",
)

NOSEBLEED = _steps(
    "Have the person sit upright and lean slightly forward.",
    "Pinch the soft part of the nose just below the bridge for 10-15 minutes without letting go.",
    "Breathe through the mouth and spit out any blood.",
    "Apply a cold compress to the bridge of the nose.",
    "Seek medical attention if bleeding lasts more than 20 minutes or follows a head injury.",
)

GUNSHOT = _steps(
    "Make sure the scene is safe, then call emergency services.",
    "Apply firm, direct pressure to the wound with a clean cloth.",
    "For heavy limb bleeding that pressure does not control, apply a tourniquet above the wound.",
    "Do not remove any embedded object.",
    "Keep the person lying down and warm, and watch for shock.",
)

IMPALED_OBJECT = _steps(
    "Call emergency services.",
    "Do not remove the object.",
    "Pad around the object with clean cloths to keep it still.",
    "Apply pressure around, not on, the object to control bleeding.",
    "Keep the person still and calm until help arrives.",
)

SEVERE_BLEEDING = _steps(
    "Apply firm pressure to the wound with a clean cloth or bandage.",
    "Keep pressure on. If blood soaks through, add more layers on top without removing the first.",
    "Raise the injured area above the heart if possible.",
    "For life-threatening limb bleeding, apply a tourniquet 5-7 cm above the wound as a last resort.",
    "Call emergency services for heavy bleeding.",
    "Keep the person warm and lying down to reduce shock.",
)

CRUSH_INJURY = _steps(
    "Call emergency services.",
    "If the person has been trapped for less than 15 minutes and it is safe, release them.",
    "If trapped longer, do not release them; wait for responders.",
    "Control any bleeding and support any suspected fracture.",
    "Keep them warm and reassured, and watch for shock.",
)

CUT = _steps(
    "Wash your hands or wear gloves.",
    "Apply gentle pressure with a clean cloth until the bleeding stops.",
    "Rinse the wound under clean running water.",
    "Apply an antiseptic and cover with a sterile dressing or adhesive bandage.",
    "Seek medical care if the cut is deep, gaping, or caused by a dirty or rusty object.",
)

ELECTRIC_SHOCK = _steps(
    "Do not touch the person until the power source is switched off.",
    "Call emergency services.",
    "Check for breathing. If not breathing, begin CPR.",
    "Cool any burns with running water and cover loosely.",
    "Everyone who has had a significant electric shock needs medical assessment.",
)

CHEMICAL_BURN = _steps(
    "Protect yourself with gloves, then remove contaminated clothing and jewellery.",
    "Brush off any dry chemical.",
    "Rinse the area with cool running water for at least 20 minutes.",
    "Call emergency services or poison control and identify the chemical if possible.",
    "Cover loosely with a clean, dry dressing.",
)

SUNBURN = _steps(
    "Move out of the sun.",
    "Cool the skin with a cool shower or damp cloths.",
    "Apply aloe vera or a moisturising lotion.",
    "Drink plenty of water.",
    "Seek care for blistering over a large area, fever, or chills.",
)

BURN = _steps(
    "Cool the burn under cool (not cold) running water for at least 20 minutes.",
    "Remove jewellery and clothing near the burn unless stuck to the skin.",
    "Do not use ice, butter or ointments.",
    "Cover with cling film or a clean, non-fluffy dressing.",
    "Call emergency services for large, deep, or facial burns, or burns in children.",
)

FRACTURE = _steps(
    "Do not try to realign the bone.",
    "Immobilise the injured area in the position you found it, using a splint or padding.",
    "Control any bleeding with pressure around, not on, any protruding bone.",
    "Apply ice wrapped in a cloth to reduce swelling.",
    "Seek immediate medical attention. Call emergency services for open fractures or suspected neck or spine injury.",
)

SPINAL = _steps(
    "Call emergency services.",
    "Do not move the person unless they are in immediate danger.",
    "Hold their head still in line with the body.",
    "Keep them calm and still, and monitor breathing.",
    "If they must be moved or vomit, log-roll them keeping head, neck and body aligned.",
)

SPRAIN = _steps(
    "Rest: stop activity and avoid putting weight on the injury.",
    "Ice: apply a cold pack wrapped in cloth for 20 minutes every 2-3 hours.",
    "Compress: wrap with an elastic bandage, not too tightly.",
    "Elevate: raise the injured limb above heart level.",
    "Seek medical attention if the person cannot bear weight or the limb looks deformed.",
)

OVERDOSE = _steps(
    "Call emergency services immediately.",
    "If opioids are suspected and naloxone is available, give it.",
    "Check for breathing. If not breathing, begin CPR.",
    "If breathing, place them in the recovery position.",
    "Keep the medication containers to show responders.",
)

POISONING = _steps(
    "Call poison control or emergency services immediately.",
    "Do not make the person vomit unless told to by professionals.",
    "If the poison is on the skin or in the eyes, rinse with running water for 15-20 minutes.",
    "Keep the container or a sample of the substance.",
    "If the person is unconscious but breathing, place them in the recovery position.",
)

SNAKE_BITE = _steps(
    "Call emergency services.",
    "Keep the person calm and still to slow the spread of venom.",
    "Keep the bitten limb at or below heart level.",
    "Remove rings and tight clothing near the bite.",
    "Do not cut the wound, suck out venom, or apply ice or a tourniquet.",
)

ANIMAL_BITE = _steps(
    "Wash the wound thoroughly with soap and running water for 5 minutes.",
    "Apply pressure with a clean cloth to stop bleeding.",
    "Cover with a sterile dressing.",
    "Seek medical care: bites often need antibiotics and a rabies or tetanus assessment.",
    "Report the animal if it is unknown or behaving strangely.",
)

TICK_BITE = _steps(
    "Use fine-tipped tweezers to grasp the tick close to the skin.",
    "Pull upward with steady pressure. Do not twist or crush it.",
    "Clean the bite and your hands with soap and water or alcohol.",
    "Note the date and watch for a rash or fever over the next few weeks.",
)

STING = _steps(
    "Scrape the stinger out with a card edge. Do not squeeze it with tweezers.",
    "Wash the area with soap and water.",
    "Apply a cold compress for 10 minutes to reduce pain and swelling.",
    "An antihistamine or hydrocortisone cream can help with itching.",
    "Call emergency services if there is difficulty breathing, swelling of the face or throat, or dizziness.",
)

MARINE_STING = _steps(
    "Get the person out of the water.",
    "Rinse the area with vinegar for at least 30 seconds if available.",
    "Remove tentacles with tweezers or a gloved hand.",
    "Immerse in hot water (as hot as tolerable) for 20-45 minutes.",
    "Call emergency services for breathing difficulty or severe pain.",
)

FROSTBITE = _steps(
    "Move the person somewhere warm.",
    "Remove wet clothing and jewellery from the affected area.",
    "Rewarm the area in warm (not hot) water for 15-30 minutes.",
    "Do not rub the area or use direct heat.",
    "Cover loosely with dry, sterile dressings and seek medical care.",
)

HYPOTHERMIA = _steps(
    "Call emergency services.",
    "Move the person to a warm, dry place and remove wet clothing.",
    "Warm the centre of the body first with blankets, skin-to-skin contact or warm compresses.",
    "Give warm, sweet drinks if they are alert. No alcohol.",
    "Handle them gently. If not breathing, begin CPR.",
)

FEVER = _steps(
    "Give an appropriate dose of paracetamol or ibuprofen for the person's age and weight.",
    "Keep them cool with light clothing and a comfortable room temperature.",
    "Give plenty of fluids in small, frequent sips.",
    "Sponge with lukewarm water if they are uncomfortable.",
    "Seek medical attention for fever over 39°C (102.2°F), lasting more than 3 days, or with a stiff neck, rash or drowsiness.",
)

EYE_INJURY = _steps(
    "Do not rub the eye.",
    "For chemicals, rinse the eye with clean water for at least 20 minutes.",
    "For small particles, blink repeatedly or flush with clean water.",
    "Do not remove objects stuck in the eye; cover both eyes loosely.",
    "Seek medical attention for any penetrating injury or changes in vision.",
)

LABOR = _steps(
    "Call emergency services.",
    "Help the mother into a comfortable position and keep her calm.",
    "Wash your hands and gather clean towels.",
    "Do not pull on the baby. Support the head as it emerges.",
    "Once born, dry the baby, place them skin-to-skin with the mother and cover both.",
    "Do not cut the cord; wait for responders.",
)

SHOCK = _steps(
    "Call emergency services.",
    "Lay the person down and raise their legs if there is no injury to the legs or spine.",
    "Keep them warm with a blanket.",
    "Treat any obvious cause, such as bleeding.",
    "Do not give food or drink, and monitor breathing.",
)

DEHYDRATION = _steps(
    "Give small, frequent sips of water or an oral rehydration solution.",
    "Avoid solid food until vomiting settles.",
    "Rest in a cool place.",
    "Seek medical care for blood in vomit or stool, no urine for 8 hours, confusion, or signs of severe dehydration.",
)

ABDOMINAL_PAIN = _steps(
    "Have the person lie in a comfortable position.",
    "Do not give food, drink or pain medication until assessed.",
    "Apply a warm (not hot) compress for mild cramps.",
    "Seek urgent care for severe, sudden or persistent pain, especially in the lower right abdomen.",
    "Call emergency services if pain comes with fainting, vomiting blood or a rigid abdomen.",
)

HEADACHE = _steps(
    "Call emergency services for a sudden, severe ('worst ever') headache, or one with stiff neck, confusion or weakness.",
    "Otherwise, rest in a quiet, dark room.",
    "Give an appropriate pain reliever.",
    "Drink water and apply a cool cloth to the forehead.",
)

SPLINTER = _steps(
    "Wash the area with soap and water.",
    "Use clean tweezers to pull the splinter out at the same angle it went in.",
    "Squeeze gently to encourage a little bleeding, then clean again.",
    "Cover with a bandage and watch for signs of infection.",
)

BLISTER = _steps(
    "Leave the blister intact if possible.",
    "Cover with a padded dressing or blister plaster.",
    "If it bursts, wash gently, do not remove the skin, and cover.",
    "Watch for redness, warmth or pus.",
)


KNOWLEDGE_ENTRIES: List[KnowledgeEntry] = [
    KnowledgeEntry(keys=["choking", "choke", "choked", "something stuck in throat", "food stuck in throat", "airway blocked"], guidance=CHOKING),
    KnowledgeEntry(keys=["not breathing", "stopped breathing", "no pulse", "cardiac arrest", "heart stopped", "cpr"], guidance=CARDIAC_ARREST),
    KnowledgeEntry(keys=["knocked out tooth", "tooth knocked out", "lost a tooth", "broken tooth"], guidance=DENTAL),
    KnowledgeEntry(keys=["hit head", "hit their head", "hit his head", "hit her head", "head injury", "head trauma", "concussion", "knocked unconscious", "fell", "fall"], guidance=HEAD_INJURY),
    KnowledgeEntry(keys=["drowning", "drowned", "pulled from water", "swimming pool accident", "inhaled water"], guidance=DROWNING),
    KnowledgeEntry(keys=["anaphylaxis", "anaphylactic", "allergic reaction", "allergic", "allergy", "allergies", "epipen", "throat swelling", "hives"], guidance=ANAPHYLAXIS),
    KnowledgeEntry(keys=["heart attack", "chest pain", "chest tightness", "crushing chest", "pain in chest", "angina"], guidance=HEART_ATTACK),
    KnowledgeEntry(keys=["heat stroke", "heatstroke", "sunstroke", "heat exhaustion", "overheated", "overheating"], guidance=HEAT_STROKE),
    KnowledgeEntry(keys=["stroke", "face drooping", "slurred speech", "arm weakness"], guidance=STROKE),
    KnowledgeEntry(keys=["seizure", "convulsion", "convulsing", "epileptic", "fitting"], guidance=SEIZURE),
    KnowledgeEntry(keys=["fainted", "fainting", "passed out", "feel faint", "feels faint"], guidance=FAINTING),
    KnowledgeEntry(keys=["unconscious", "unresponsive", "not responding", "collapsed", "won't wake up"], guidance=UNCONSCIOUS),
    KnowledgeEntry(keys=["panic attack", "anxiety attack", "hyperventilating", "hyperventilation"], guidance=PANIC_ATTACK),
    KnowledgeEntry(keys=["asthma", "wheezing", "shortness of breath", "short of breath", "difficulty breathing", "trouble breathing", "can't breathe", "cannot breathe"], guidance=ASTHMA),
    KnowledgeEntry(keys=["carbon monoxide", "smoke inhalation", "inhaled smoke", "gas leak", "fumes"], guidance=SMOKE_INHALATION),
    KnowledgeEntry(keys=["low blood sugar", "blood sugar", "hypoglycemia", "hypoglycaemia", "diabetic", "insulin"], guidance=DIABETIC),
    KnowledgeEntry(keys=["nosebleed", "nose bleed", "bleeding nose", "bloody nose", "nose is bleeding"], guidance=NOSEBLEED),
    KnowledgeEntry(keys=["gunshot", "been shot", "was shot", "bullet wound"], guidance=GUNSHOT),
    KnowledgeEntry(keys=["impaled", "stab wound", "stabbed", "object stuck in"], guidance=IMPALED_OBJECT),
    KnowledgeEntry(keys=["severe bleeding", "bleeding heavily", "heavy bleeding", "bleeding", "bleed", "blood", "amputation", "severed"], guidance=SEVERE_BLEEDING),
    KnowledgeEntry(keys=["crush injury", "crushed", "trapped under", "pinned under"], guidance=CRUSH_INJURY),
    KnowledgeEntry(keys=["deep cut", "laceration", "cut", "wound", "scrape", "graze", "puncture"], guidance=CUT),
    KnowledgeEntry(keys=["electric shock", "electrocuted", "electrocution"], guidance=ELECTRIC_SHOCK),
    KnowledgeEntry(keys=["chemical burn", "acid burn", "bleach on skin", "chemical on skin"], guidance=CHEMICAL_BURN),
    KnowledgeEntry(keys=["sunburn", "sun burn"], guidance=SUNBURN),
    KnowledgeEntry(keys=["burn", "burned", "burnt", "scald", "scalded", "on fire"], guidance=BURN),
    KnowledgeEntry(keys=["broken bone", "fracture", "broken arm", "broken leg", "broken wrist", "bone sticking out", "dislocated", "dislocation"], guidance=FRACTURE),
    KnowledgeEntry(keys=["neck injury", "back injury", "spinal", "spine"], guidance=SPINAL),
    KnowledgeEntry(keys=["sprain", "twisted ankle", "rolled ankle", "muscle strain", "pulled muscle"], guidance=SPRAIN),
    KnowledgeEntry(keys=["overdose", "too many pills", "took too much medication", "opioid"], guidance=OVERDOSE),
    KnowledgeEntry(keys=["poison", "swallowed bleach", "swallowed chemical", "ingested", "drank cleaning"], guidance=POISONING),
    KnowledgeEntry(keys=["snake bite", "snakebite", "bitten by a snake"], guidance=SNAKE_BITE),
    KnowledgeEntry(keys=["tick bite", "tick on", "tick attached"], guidance=TICK_BITE),
    KnowledgeEntry(keys=["dog bite", "cat bite", "animal bite", "bitten", "bite"], guidance=ANIMAL_BITE),
    KnowledgeEntry(keys=["jellyfish", "stingray", "sea urchin"], guidance=MARINE_STING),
    KnowledgeEntry(keys=["bee sting", "wasp sting", "stung", "sting"], guidance=STING),
    KnowledgeEntry(keys=["frostbite", "frostbitten", "frozen fingers", "frozen toes"], guidance=FROSTBITE),
    KnowledgeEntry(keys=["hypothermia", "hypothermic", "freezing cold", "shivering uncontrollably", "low temperature", "body temperature drop"], guidance=HYPOTHERMIA),
    KnowledgeEntry(keys=["high fever", "fever", "febrile", "high temperature"], guidance=FEVER),
    KnowledgeEntry(keys=["eye injury", "chemical in eye", "something in eye", "in my eye", "in the eye", "in his eye", "in her eye"], guidance=EYE_INJURY),
    KnowledgeEntry(keys=["giving birth", "in labor", "in labour", "contractions", "water broke", "baby coming"], guidance=LABOR),
    KnowledgeEntry(keys=["in shock", "pale and clammy", "cold and clammy"], guidance=SHOCK),
    KnowledgeEntry(keys=["dehydrated", "dehydration", "vomiting", "throwing up", "diarrhea", "diarrhoea"], guidance=DEHYDRATION),
    KnowledgeEntry(keys=["stomach pain", "abdominal pain", "appendicitis", "stomach ache"], guidance=ABDOMINAL_PAIN),
    KnowledgeEntry(keys=["severe headache", "headache", "migraine"], guidance=HEADACHE),
    KnowledgeEntry(keys=["splinter"], guidance=SPLINTER),
    KnowledgeEntry(keys=["blister"], guidance=BLISTER),
]

GUIDANCE_TABLE: KeywordTable[str] = KeywordTable.from_entries(KNOWLEDGE_ENTRIES, DEFAULT_GUIDANCE, name="guidance")
