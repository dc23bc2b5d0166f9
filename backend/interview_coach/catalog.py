from typing import Dict, List

DIFFICULTIES: List[str] = ["Easy", "Medium", "Hard"]

TOPICS: Dict[str, List[str]] = {
	"Software Engineering": ["System Design", "Design Patterns", "OOP", "SOLID Principles", "Microservices", "Testing", "Agile/Scrum"],
	"Data Structures & Algo": ["Arrays & Strings", "Linked Lists", "Trees & Graphs", "Dynamic Programming", "Recursion", "Sorting & Searching", "Hash Maps"],
	"Frontend Engineering": ["React.js", "Vue.js", "Angular", "HTML/CSS", "JavaScript (ES6+)", "TypeScript", "Redux/State Management", "Next.js"],
	"Backend Engineering": ["Node.js", "Express.js", "Django", "Spring Boot", "REST APIs", "GraphQL", "Database Design (SQL/NoSQL)", "Authentication"],
	"Full Stack (MERN)": ["MongoDB", "Express.js", "React.js", "Node.js", "Mongoose", "JWT Auth", "Deployment"],
	"Data Science": ["Python", "Statistics", "Data Visualization", "Pandas/NumPy", "SQL for Data Science", "Exploratory Data Analysis"],
	"Machine Learning": ["Supervised Learning", "Unsupervised Learning", "Neural Networks", "Scikit-Learn", "Model Evaluation", "NLP", "Computer Vision"],
	"Deep Learning": ["TensorFlow", "PyTorch", "CNNs", "RNNs/LSTMs", "Transformers", "GANs"],
	"Data Engineering": ["ETL Pipelines", "Big Data (Spark/Hadoop)", "Data Warehousing", "SQL Optimization", "Apache Airflow", "Cloud Data Services"],
	"DevOps": ["Docker", "Kubernetes", "CI/CD", "AWS/Azure", "Linux", "Terraform"],
}
