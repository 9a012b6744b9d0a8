from ..codec import VocabularyCodec

# Everyday English, enough to cover most words of a short conversation
DAILY_LIFE_TEXT = (
    "Good morning everyone! Today is Monday and I need to wake up early "
    "because I have an important meeting at the office. First, I will take "
    "a hot shower, brush my teeth, wash my face, and get dressed in my "
    "business clothes. For breakfast, I usually eat bread with butter, "
    "drink fresh orange juice, and sometimes have eggs with bacon. My wife "
    "prepares lunch while I check the weather forecast on my phone and "
    "read the morning newspaper. I drive my blue car to work through the "
    "busy city streets, passing many shops, restaurants, banks, hospitals, "
    "schools, and churches along the way. The traffic is heavy during rush "
    "hour, so I listen to music on the radio while waiting at red lights. "
    "At the office building, I take the elevator to the fifth floor where "
    "my desk is located near a large window overlooking the beautiful park "
    "across the street. During work hours, I use my laptop computer to "
    "write emails, create documents, analyze data, attend virtual "
    "conferences, and communicate with colleagues from different "
    "departments. We discuss various projects, solve complex problems, "
    "make important decisions, and plan future strategies for our company. "
    "My boss is very professional and supportive, always encouraging "
    "teamwork and creativity among employees. For lunch break, I often "
    "visit the cafeteria downstairs or walk to nearby restaurants with my "
    "coworkers. We might order pizza, sandwiches, salads, soup, chicken, "
    "fish, rice, vegetables, or pasta dishes. Sometimes we grab coffee, "
    "tea, water, or soft drinks from the vending machine. During these "
    "casual conversations, we share stories about our personal lives, "
    "hobbies, interests, travel experiences, and weekend adventures. After "
    "finishing work at six o'clock, I drive back home through different "
    "routes to avoid traffic jams. At home, my family welcomes me warmly. "
    "My children show me their school assignments, art projects, and tell "
    "me about their teachers, classmates, and daily activities. My wife "
    "updates me about household matters, grocery shopping, bill payments, "
    "and social events in our neighborhood. In the evening, we prepare "
    "dinner together in the kitchen. Tonight we are cooking roasted beef "
    "with potatoes, carrots, and green beans. While waiting for food to "
    "cook, we set the dining table with plates, cups, forks, knives, "
    "spoons, and napkins. During dinner, we discuss current events, "
    "politics, sports, entertainment news, and make plans for the upcoming "
    "weekend. After dinner, we clean the dishes, wipe the table, and "
    "organize the kitchen. Then we move to the living room where we sit on "
    "comfortable sofas and watch television programs like comedy shows, "
    "drama series, documentaries, or movies. Sometimes we play board "
    "games, card games, or video games together. The children practice "
    "piano lessons while adults read magazines, books, or browse the "
    "internet on their tablets. Before bedtime, we help children with "
    "their homework assignments including mathematics, science, history, "
    "geography, language arts, and creative writing. We also prepare their "
    "school bags, uniforms, and lunch boxes for tomorrow. Parents take "
    "turns reading bedtime stories to younger kids and tucking them into "
    "their cozy beds. On weekends, our routine is more relaxed and "
    "flexible. Saturday mornings often begin with pancakes, fresh fruits, "
    "yogurt, and hot chocolate for breakfast. We might visit shopping "
    "malls, supermarkets, libraries, museums, theaters, or recreational "
    "centers. During shopping trips, we buy groceries, clothes, shoes, "
    "toys, electronics, books, medicines, and other household necessities. "
    "Sunday afternoons are perfect for outdoor activities like walking in "
    "parks, having picnics, playing sports, riding bicycles, or visiting "
    "beaches and mountains. We also spend time gardening, planting "
    "flowers, watering plants, cutting grass, and maintaining our "
    "backyard. Family gatherings with grandparents, aunts, uncles, and "
    "cousins happen frequently during holidays and special celebrations. "
    "Throughout the year, we celebrate birthdays, anniversaries, "
    "Christmas, New Year, Thanksgiving, Easter, and other cultural "
    "festivals with traditional foods, decorations, gifts, and memorable "
    "activities. We take photographs, create photo albums, and preserve "
    "precious memories of these wonderful moments. During vacation "
    "periods, we travel to different cities, states, or countries, staying "
    "in hotels, exploring historical sites, trying local cuisines, "
    "learning about diverse cultures, and meeting new people. These "
    "experiences broaden our perspectives and create lasting friendships. "
    "Technology plays a significant role in our daily lives through "
    "smartphones, computers, internet connections, social media platforms, "
    "online shopping, digital banking, streaming services, and educational "
    "apps. We stay connected with friends and relatives living far away "
    "through video calls, text messages, and social networking websites. "
    "Health and fitness are priorities in our household. We exercise "
    "regularly by jogging, swimming, cycling, or attending gym classes. We "
    "maintain balanced diets with plenty of fruits, vegetables, whole "
    "grains, lean proteins, and limited processed foods. Regular medical "
    "checkups, dental visits, and preventive care help us stay healthy and "
    "active. Financial planning involves budgeting monthly expenses, "
    "saving money for emergencies, investing in retirement accounts, "
    "paying mortgages, insurance premiums, and educational loans. We teach "
    "children about money management, the importance of saving, and making "
    "wise spending decisions. Environmental consciousness influences our "
    "lifestyle choices. We recycle materials, conserve water and "
    "electricity, use public transportation when possible, and support "
    "sustainable products. Community involvement includes volunteering at "
    "local charities, participating in neighborhood events, and "
    "contributing to social causes. Education remains a lifelong journey "
    "for everyone in our family. Adults pursue professional development "
    "through training programs, workshops, seminars, and online courses. "
    "Children excel in academics while exploring extracurricular "
    "activities like sports teams, music lessons, art classes, and science "
    "clubs. This comprehensive overview of daily life demonstrates how "
    "interconnected our personal, professional, social, and community "
    "experiences truly are in modern society today."
)


def learn_daily_vocabulary(codec: VocabularyCodec) -> int:
    """Teach `codec` the built-in daily-life text, returning the number of new words."""
    size = codec.vocab_size()
    codec.learn(DAILY_LIFE_TEXT)
    return codec.vocab_size() - size
