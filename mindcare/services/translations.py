"""
Reply tables, keyed language -> category -> candidate replies.

English carries every category. The other languages translate the greeting,
mood and general pools; every other category falls back to English at lookup
time.
"""

TRANSLATIONS = {
    "en": {
        "greetings": [
            "Hello! I'm so glad you're here. How are you feeling today?",
            "Hi there! I'm your mental health companion. What's on your mind?",
            "Welcome! I'm here to listen and support you. How can I help today?",
            "Hello! It's great to see you. How are you doing right now?",
        ],
        "mood_positive": [
            "That's wonderful to hear! I'm so glad you're feeling good. What's contributing to this positive mood?",
            "It makes me happy to know you're feeling well! Can you tell me more about what's going well for you?",
            "That's fantastic! Positive moments like these are so important. What helped you feel this way?",
        ],
        "mood_negative": [
            "I'm sorry you're feeling this way. Your feelings are completely valid. Can you tell me more about what's going on?",
            "I hear that you're struggling right now. That must be really difficult. I'm here to listen and support you.",
            "Thank you for sharing how you're feeling. It takes courage to be open about difficult emotions. What's been weighing on you?",
        ],
        "mood_neutral": [
            "I understand you're feeling neutral right now. Sometimes that's exactly what we need. How has your day been overall?",
            "Neutral feelings are completely normal. Sometimes we need to just be where we are. What's been on your mind lately?",
        ],
        "general": [
            "I'm here to listen and support you. Can you tell me more about what's on your mind?",
            "Thank you for sharing with me. I want to understand better. What's been challenging for you lately?",
            "I'm listening. Sometimes it helps to talk through what we're experiencing. What's been weighing on you?",
            "I'm here for you. What would be most helpful for you right now?",
        ],
        "anxiety": [
            "I understand anxiety can feel overwhelming. Let's try a simple breathing exercise together. "
            "Take a slow, deep breath in for 4 counts, hold for 4, and exhale for 6. Would you like to try this?",
            "Anxiety is challenging, but you're not alone in this. One technique that often helps is the 5-4-3-2-1 "
            "grounding method: name 5 things you can see, 4 you can touch, 3 you can hear, 2 you can smell, and 1 you can taste.",
            "When anxiety feels intense, remember that this feeling will pass. Try focusing on your breathing and remind "
            "yourself that you've gotten through difficult moments before. What usually helps you feel more grounded?",
        ],
        "depression": [
            "I'm sorry you're feeling this way. Depression can make everything feel heavy and difficult. Remember that your "
            "feelings are valid, and it's okay to not be okay. What's one small thing that might feel manageable right now?",
            "When depression feels overwhelming, sometimes the smallest steps can make a difference. Even getting out of bed "
            "or taking a shower can be an accomplishment. What's one thing you're proud of yourself for today?",
            "Depression can make us feel isolated, but you're not alone. Many people understand what you're going through. "
            "What's been the most challenging part of your day?",
        ],
        "stress": [
            "Stress can feel overwhelming, but there are ways to manage it. Let's try a quick stress relief technique: tense "
            "and then relax each muscle group, starting from your toes and working up to your head.",
            "When stress builds up, it's important to take breaks. Even a 5-minute walk or some deep breathing can help reset "
            "your nervous system. What's one small thing you could do for yourself right now?",
            "Stress is your body's response to pressure, and it's completely normal. The key is finding healthy ways to "
            "manage it. What usually helps you feel more relaxed?",
        ],
        "sleep": [
            "Sleep is so important for mental health. Try creating a relaxing bedtime routine: dim the lights, avoid screens "
            "an hour before bed, and try some gentle stretching or reading.",
            "If you're having trouble sleeping, try the 4-7-8 breathing technique: inhale for 4, hold for 7, exhale for 8. "
            "This can help activate your body's relaxation response.",
            "Good sleep hygiene includes keeping a consistent schedule, even on weekends. What's your current bedtime routine like?",
        ],
        "relationships": [
            "Relationships can be complex and sometimes challenging. It's important to communicate your needs clearly and set "
            "healthy boundaries. What's been on your mind regarding your relationships?",
            "Healthy relationships require effort from both people. Remember that you deserve to be treated with respect and "
            "kindness. What's one thing you could do to nurture your relationships?",
            "Sometimes we need to step back and evaluate our relationships. What's been working well, and what might need some attention?",
        ],
        "self_care": [
            "Self-care isn't selfish, it's essential! What's one thing you could do today to take care of yourself? "
            "Even small acts of self-care can make a big difference.",
            "Self-care looks different for everyone. It might be taking a bath, going for a walk, reading a book, or simply "
            "allowing yourself to rest. What feels nourishing to you?",
            "Remember that self-care includes both physical and emotional needs. What's one way you could be kinder to yourself today?",
        ],
        "cbt": [
            "CBT (Cognitive Behavioral Therapy) helps us understand the connection between our thoughts, feelings, and "
            "behaviors. Here's a simple CBT technique:\n\n"
            "1. Notice your thought\n"
            "2. Ask: 'Is this thought helpful or harmful?'\n"
            "3. If harmful, ask: 'What's a more balanced way to think about this?'\n"
            "4. Practice the new thought\n\n"
            "Would you like to try this with a specific thought that's been bothering you?",
        ],
        "mindfulness": [
            "Mindfulness is about being present in the moment without judgment. Here's a simple mindfulness practice:\n\n"
            "Take a moment to notice:\n"
            "• 5 things you can see\n"
            "• 4 things you can touch\n"
            "• 3 things you can hear\n"
            "• 2 things you can smell\n"
            "• 1 thing you can taste\n\n"
            "This grounding technique can help bring you back to the present moment. How does it feel?",
        ],
        "gratitude": [
            "Gratitude is such a powerful practice! Even in difficult times, there are often small things to appreciate. "
            "What's one thing you're grateful for today?",
            "Practicing gratitude can shift our perspective and improve our mood. What's something positive that happened "
            "today, no matter how small?",
            "Gratitude doesn't mean ignoring difficult feelings, it's about finding balance. What's one thing that brought "
            "you a moment of joy or peace today?",
        ],
        "coping": [
            "Here are some healthy coping strategies you can try:\n\n"
            "• Deep breathing exercises\n"
            "• Physical activity or gentle movement\n"
            "• Talking to someone you trust\n"
            "• Journaling your thoughts and feelings\n"
            "• Engaging in a hobby you enjoy\n"
            "• Practicing mindfulness or meditation\n\n"
            "What coping strategies have worked for you in the past?",
        ],
        "progress": [
            "It's wonderful that you're noticing progress! Growth isn't always linear, and every step forward matters. "
            "What changes have you noticed in yourself?",
            "Celebrating progress, no matter how small, is so important. What's one thing you're proud of yourself for recently?",
            "Progress looks different for everyone. Sometimes it's about managing difficult days better, or being kinder to "
            "yourself. What progress are you noticing?",
        ],
        "resources": [
            "I'm here to provide support, but I also want to make sure you have access to professional resources when needed:\n\n"
            "• Consider speaking with a therapist or counselor\n"
            "• Reach out to trusted friends or family\n"
            "• Use crisis helplines if you're in immediate distress\n"
            "• Practice self-care and healthy coping strategies\n\n"
            "Remember, seeking professional help is a sign of strength, not weakness. What kind of support are you looking for?",
        ],
        "welcome": "Hello! I'm here to listen and support you. How can I help today?",
        "encouragement": {
            "1": "I'm sorry you're feeling low. Remember that difficult feelings are temporary, and you're not alone. "
                 "Is there anything specific that's been weighing on you?",
            "2": "I hear that you're having a tough time. It's okay to not be okay. What's one small thing that might help "
                 "you feel a little better today?",
            "3": "Neutral feelings are completely normal. Sometimes we need to just be where we are. How has your day been overall?",
            "4": "It's wonderful that you're feeling good! What's contributing to this positive mood?",
            "5": "That's fantastic! I'm so glad you're feeling great. What's been going well for you lately?",
            "default": "Thank you for sharing your mood with me.",
        },
    },
    "hi": {
        "greetings": [
            "नमस्ते! मुझे खुशी है कि आप यहाँ हैं। आज आप कैसा महसूस कर रहे हैं?",
            "हैलो! मैं आपका मानसिक स्वास्थ्य साथी हूँ। आपके मन में क्या है?",
            "स्वागत है! मैं यहाँ आपकी सुनने और सहायता करने के लिए हूँ। आज मैं कैसे मदद कर सकता हूँ?",
            "नमस्ते! आपको देखकर बहुत अच्छा लगा। अभी आप कैसे हैं?"
        ],
        "mood_positive": [
            "यह सुनकर बहुत अच्छा लगा! मुझे खुशी है कि आप अच्छा महसूस कर रहे हैं। इस सकारात्मक मूड में क्या योगदान दे रहा है?",
            "यह जानकर खुशी हुई कि आप अच्छा महसूस कर रहे हैं! क्या आप मुझे बता सकते हैं कि आपके लिए क्या अच्छा चल रहा है?",
            "यह शानदार है! ऐसे सकारात्मक पल बहुत महत्वपूर्ण हैं। आपको ऐसा महसूस कराने में क्या मदद की?"
        ],
        "mood_negative": [
            "मुझे खेद है कि आप ऐसा महसूस कर रहे हैं। आपकी भावनाएं पूरी तरह वैध हैं। क्या आप मुझे बता सकते हैं कि क्या चल रहा है?",
            "मैं सुन रहा हूँ कि आप अभी संघर्ष कर रहे हैं। यह वास्तव में मुश्किल होना चाहिए। मैं यहाँ आपकी सुनने और सहायता करने के लिए हूँ।",
            "आपकी भावनाओं को साझा करने के लिए धन्यवाद। कठिन भावनाओं के बारे में खुलकर बात करने में साहस लगता है। आप पर क्या भारी पड़ रहा है?"
        ],
        "mood_neutral": [
            "मैं समझता हूँ कि आप अभी तटस्थ महसूस कर रहे हैं। कभी-कभी यही वह चीज़ होती है जिसकी हमें जरूरत होती है। आपका दिन कैसा रहा है?",
            "तटस्थ भावनाएं पूरी तरह सामान्य हैं। कभी-कभी हमें बस वहीं रहना चाहिए जहाँ हम हैं। हाल ही में आपके मन में क्या रहा है?"
        ],
        "general": [
            "मैं यहाँ आपकी सुनने और सहायता करने के लिए हूँ। क्या आप मुझे बता सकते हैं कि आपके मन में क्या है?",
            "मेरे साथ साझा करने के लिए धन्यवाद। मैं बेहतर समझना चाहता हूँ—हाल ही में आपके लिए क्या चुनौतीपूर्ण रहा है?",
            "मैं सुन रहा हूँ। कभी-कभी जो हम अनुभव कर रहे हैं उसके बारे में बात करना मदद करता है। आप पर क्या भारी पड़ रहा है?",
            "मैं आपके लिए यहाँ हूँ। अभी आपके लिए क्या सबसे मददगार होगा?"
        ],
    },
    "mr": {
        "greetings": [
            "नमस्कार! मला आनंद आहे की तुम्ही इथे आहात. आज तुम्हाला कसे वाटत आहे?",
            "हॅलो! मी तुमचा मानसिक आरोग्य साथी आहे. तुमच्या मनात काय आहे?",
            "स्वागत! मी तुमचे ऐकणे आणि मदत करण्यासाठी इथे आहे. आज मी कशी मदत करू शकतो?",
            "नमस्कार! तुम्हाला बघून खूप छान वाटले. आत्ता तुम्ही कसे आहात?"
        ],
        "mood_positive": [
            "हे ऐकून खूप छान वाटले! मला आनंद आहे की तुम्ही चांगले वाटत आहात. या सकारात्मक मूडमध्ये काय योगदान देत आहे?",
            "तुम्ही चांगले वाटत आहात हे जाणून आनंद झाला! तुम्ही मला सांगू शकता की तुमच्यासाठी काय चांगले चालत आहे?",
            "हे अप्रतिम आहे! अशे सकारात्मक क्षण खूप महत्वाचे आहेत. तुम्हाला असे वाटण्यात काय मदत केली?"
        ],
        "mood_negative": [
            "मला वाईट वाटत आहे की तुम्हाला असे वाटत आहे. तुमच्या भावना पूर्णपणे वैध आहेत. तुम्ही मला सांगू शकता की काय चालत आहे?",
            "मी ऐकत आहे की तुम्ही आत्ता संघर्ष करत आहात. हे खरोखर कठीण असावे. मी तुमचे ऐकणे आणि मदत करण्यासाठी इथे आहे.",
            "तुमच्या भावना सामायिक केल्याबद्दल धन्यवाद. कठीण भावनांबद्दल उघडपणे बोलण्यासाठी धैर्य लागते. तुमच्यावर काय भारी पडत आहे?"
        ],
        "mood_neutral": [
            "मी समजतो की तुम्ही आत्ता तटस्थ वाटत आहात. कधीकधी हेच आवश्यक असते. तुमचा दिवस कसा गेला?",
            "तटस्थ भावना पूर्णपणे सामान्य आहेत. कधीकधी आपल्याला फक्त जिथे आहात तिथेच रहावे लागते. अलीकडे तुमच्या मनात काय आहे?"
        ],
        "general": [
            "मी तुमचे ऐकणे आणि मदत करण्यासाठी इथे आहे. तुम्ही मला सांगू शकता की तुमच्या मनात काय आहे?",
            "माझ्याशी सामायिक केल्याबद्दल धन्यवाद. मला चांगले समजायचे आहे—अलीकडे तुमच्यासाठी काय आव्हानात्मक राहिले आहे?",
            "मी ऐकत आहे. कधीकधी आपण जे अनुभवत आहोत त्याबद्दल बोलणे मदत करते. तुमच्यावर काय भारी पडत आहे?",
            "मी तुमच्यासाठी इथे आहे. आत्ता तुमच्यासाठी काय सर्वात उपयुक्त असेल?"
        ],
    },
    "kn": {
        "greetings": [
            "ನಮಸ್ಕಾರ! ನೀವು ಇಲ್ಲಿದ್ದೀರಿ ಎಂದು ನನಗೆ ಸಂತೋಷವಾಗಿದೆ. ಇಂದು ನಿಮಗೆ ಹೇಗೆ ಅನಿಸುತ್ತಿದೆ?",
            "ಹಲೋ! ನಾನು ನಿಮ್ಮ ಮಾನಸಿಕ ಆರೋಗ್ಯ ಸಹಚರ. ನಿಮ್ಮ ಮನಸ್ಸಿನಲ್ಲಿ ಏನಿದೆ?",
            "ಸ್ವಾಗತ! ನಿಮ್ಮನ್ನು ಕೇಳಲು ಮತ್ತು ಬೆಂಬಲಿಸಲು ನಾನು ಇಲ್ಲಿದ್ದೇನೆ. ಇಂದು ನಾನು ಹೇಗೆ ಸಹಾಯ ಮಾಡಬಹುದು?",
            "ನಮಸ್ಕಾರ! ನಿಮ್ಮನ್ನು ನೋಡಿ ತುಂಬಾ ಚೆನ್ನಾಗಿದೆ. ಇದೀಗ ನೀವು ಹೇಗಿದ್ದೀರಿ?"
        ],
        "mood_positive": [
            "ಇದನ್ನು ಕೇಳಿ ತುಂಬಾ ಚೆನ್ನಾಗಿದೆ! ನೀವು ಚೆನ್ನಾಗಿ ಅನಿಸುತ್ತಿದ್ದೀರಿ ಎಂದು ನನಗೆ ಸಂತೋಷವಾಗಿದೆ. ಈ ಧನಾತ್ಮಕ ಮನಸ್ಥಿತಿಗೆ ಏನು ಕೊಡುಗೆ ನೀಡುತ್ತಿದೆ?",
            "ನೀವು ಚೆನ್ನಾಗಿ ಅನಿಸುತ್ತಿದ್ದೀರಿ ಎಂದು ತಿಳಿದು ಸಂತೋಷವಾಗಿದೆ! ನಿಮಗೆ ಏನು ಚೆನ್ನಾಗಿ ನಡೆಯುತ್ತಿದೆ ಎಂಬುದನ್ನು ನೀವು ನನಗೆ ಹೆಚ್ಚು ಹೇಳಬಹುದೇ?",
            "ಇದು ಅದ್ಭುತವಾಗಿದೆ! ಇಂತಹ ಧನಾತ್ಮಕ ಕ್ಷಣಗಳು ತುಂಬಾ ಮುಖ್ಯವಾಗಿವೆ. ನಿಮಗೆ ಈ ರೀತಿ ಅನಿಸುವುದಕ್ಕೆ ಏನು ಸಹಾಯ ಮಾಡಿತು?"
        ],
        "mood_negative": [
            "ನೀವು ಈ ರೀತಿ ಅನಿಸುತ್ತಿದ್ದೀರಿ ಎಂದು ನನಗೆ ವಿಷಾದವಾಗಿದೆ. ನಿಮ್ಮ ಭಾವನೆಗಳು ಸಂಪೂರ್ಣವಾಗಿ ಮಾನ್ಯವಾಗಿವೆ. ಏನು ನಡೆಯುತ್ತಿದೆ ಎಂಬುದನ್ನು ನೀವು ನನಗೆ ಹೆಚ್ಚು ಹೇಳಬಹುದೇ?",
            "ನೀವು ಇದೀಗ ಹೋರಾಟ ನಡೆಸುತ್ತಿದ್ದೀರಿ ಎಂದು ನಾನು ಕೇಳುತ್ತಿದ್ದೇನೆ. ಇದು ನಿಜವಾಗಿಯೂ ಕಷ್ಟವಾಗಿರಬೇಕು. ನಿಮ್ಮನ್ನು ಕೇಳಲು ಮತ್ತು ಬೆಂಬಲಿಸಲು ನಾನು ಇಲ್ಲಿದ್ದೇನೆ.",
            "ನಿಮ್ಮ ಭಾವನೆಗಳನ್ನು ಹಂಚಿಕೊಂಡಿದ್ದಕ್ಕಾಗಿ ಧನ್ಯವಾದಗಳು. ಕಷ್ಟಕರ ಭಾವನೆಗಳ ಬಗ್ಗೆ ತೆರೆದುಕೊಂಡು ಮಾತನಾಡಲು ಧೈರ್ಯ ಬೇಕು. ನಿಮ್ಮ ಮೇಲೆ ಏನು ಭಾರವಾಗಿದೆ?"
        ],
        "mood_neutral": [
            "ನೀವು ಇದೀಗ ತಟಸ್ಥವಾಗಿ ಅನಿಸುತ್ತಿದ್ದೀರಿ ಎಂದು ನಾನು ಅರ್ಥಮಾಡಿಕೊಂಡಿದ್ದೇನೆ. ಕೆಲವೊಮ್ಮೆ ಇದು ನಮಗೆ ಬೇಕಾದುದೇ. ನಿಮ್ಮ ದಿನ ಹೇಗಿತ್ತು?",
            "ತಟಸ್ಥ ಭಾವನೆಗಳು ಸಂಪೂರ್ಣವಾಗಿ ಸಾಮಾನ್ಯವಾಗಿವೆ. ಕೆಲವೊಮ್ಮೆ ನಾವು ಇರುವಲ್ಲೇ ಇರಬೇಕು. ಇತ್ತೀಚೆಗೆ ನಿಮ್ಮ ಮನಸ್ಸಿನಲ್ಲಿ ಏನಿದೆ?"
        ],
        "general": [
            "ನಿಮ್ಮನ್ನು ಕೇಳಲು ಮತ್ತು ಬೆಂಬಲಿಸಲು ನಾನು ಇಲ್ಲಿದ್ದೇನೆ. ನಿಮ್ಮ ಮನಸ್ಸಿನಲ್ಲಿ ಏನಿದೆ ಎಂಬುದನ್ನು ನೀವು ನನಗೆ ಹೆಚ್ಚು ಹೇಳಬಹುದೇ?",
            "ನನ್ನೊಂದಿಗೆ ಹಂಚಿಕೊಂಡಿದ್ದಕ್ಕಾಗಿ ಧನ್ಯವಾದಗಳು. ನಾನು ಚೆನ್ನಾಗಿ ಅರ್ಥಮಾಡಿಕೊಳ್ಳಲು ಬಯಸುತ್ತೇನೆ—ಇತ್ತೀಚೆಗೆ ನಿಮಗೆ ಏನು ಸವಾಲಾಗಿದೆ?",
            "ನಾನು ಕೇಳುತ್ತಿದ್ದೇನೆ. ಕೆಲವೊಮ್ಮೆ ನಾವು ಅನುಭವಿಸುತ್ತಿರುವುದರ ಬಗ್ಗೆ ಮಾತನಾಡುವುದು ಸಹಾಯಕವಾಗುತ್ತದೆ. ನಿಮ್ಮ ಮೇಲೆ ಏನು ಭಾರವಾಗಿದೆ?",
            "ನಾನು ನಿಮಗಾಗಿ ಇಲ್ಲಿದ್ದೇನೆ. ಇದೀಗ ನಿಮಗೆ ಏನು ಹೆಚ್ಚು ಸಹಾಯಕವಾಗುತ್ತದೆ?"
        ],
    },
}
